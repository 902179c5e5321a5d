# File: foxy_admin/core/version.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel

from foxy_admin.core.settings import SERVICE_NAME

logger = logging.getLogger("foxy_admin.version")

UNKNOWN = "unknown"
LOCAL_DEV_IMAGE = "local-dev-admin"


class VersionDescriptor(BaseModel):
    """Build metadata for the running container, read once at startup."""

    model_config = {"frozen": True}

    service: str = SERVICE_NAME
    image: str = LOCAL_DEV_IMAGE
    build_time: str = UNKNOWN
    git_commit: str = UNKNOWN
    environment: str = UNKNOWN

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump()


def sentinel_descriptor(
    *,
    service: str = SERVICE_NAME,
    environment: str = UNKNOWN,
    fallback_image: str = LOCAL_DEV_IMAGE,
) -> VersionDescriptor:
    return VersionDescriptor(service=service, image=fallback_image, environment=environment)


def _field(parts: List[str], idx: int) -> str:
    if idx < len(parts):
        value = parts[idx].strip()
        if value:
            return value
    return UNKNOWN


def parse_descriptor(
    content: str,
    *,
    service: str = SERVICE_NAME,
    environment: str = UNKNOWN,
    fallback_image: str = LOCAL_DEV_IMAGE,
) -> VersionDescriptor:
    """
    Parse the CI-written descriptor.

    Accepted shapes (surrounding whitespace ignored):
      image,build_time,git_commit     split on the first two commas only
      image\\nbuild_time\\ngit_commit    one field per line
      image                           the other fields are "unknown"
    Empty content yields the sentinel descriptor.
    """
    text = content.strip()
    if not text:
        return sentinel_descriptor(service=service, environment=environment, fallback_image=fallback_image)

    if "," in text:
        parts = text.split(",", 2)
    else:
        parts = [line for line in text.splitlines() if line.strip()]

    image = _field(parts, 0)
    if image == UNKNOWN:
        image = fallback_image

    return VersionDescriptor(
        service=service,
        image=image,
        build_time=_field(parts, 1),
        git_commit=_field(parts, 2),
        environment=environment,
    )


def load_descriptor(
    path: Union[str, Path],
    *,
    service: str = SERVICE_NAME,
    environment: str = UNKNOWN,
    fallback_image: str = LOCAL_DEV_IMAGE,
) -> VersionDescriptor:
    p = Path(path)
    try:
        content = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Version file not found at %s; using %s", p, fallback_image)
        return sentinel_descriptor(service=service, environment=environment, fallback_image=fallback_image)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Version file unreadable at %s (%s); using %s", p, e, fallback_image)
        return sentinel_descriptor(service=service, environment=environment, fallback_image=fallback_image)

    descriptor = parse_descriptor(
        content, service=service, environment=environment, fallback_image=fallback_image
    )
    if not content.strip():
        logger.warning("Version file at %s is empty; using %s", p, fallback_image)
    return descriptor
