"""Thumbnail handling for Site Publisher."""

from site_publisher.images.thumbnails import ThumbnailStore

__all__ = ["ThumbnailStore"]
