import os

STRICT = os.environ.get("RLESTREAM_STRICT", "").lower() in ("1", "true", "yes")
