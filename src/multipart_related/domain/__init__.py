"""Domain layer: MIME envelope values and the RFC 2387 multipart/related model."""
