"""Standard library email adapters for the multipart codec port."""

from .email_multipart_codec import EmailMultipartCodec

__all__ = ["EmailMultipartCodec"]
