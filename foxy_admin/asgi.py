# File: foxy_admin/asgi.py
# For ASGI servers started directly: `uvicorn foxy_admin.asgi:app`
from foxy_admin.main import create_app

app = create_app()
