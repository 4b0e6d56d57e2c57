"""Ports for the multipart envelope layer."""

from .multipart_codec_port import MultipartCodecPort

__all__ = ["MultipartCodecPort"]
