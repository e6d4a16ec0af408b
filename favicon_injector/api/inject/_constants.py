"""Constants for favicon injection (private)."""

DEFAULT_FAVICON_PATH = "/favicon.ico"
DEFAULT_REL = "icon"

# rel values that count as an existing favicon link (case-sensitive)
FAVICON_RELS = ("icon", "shortcut icon", "apple-touch-icon")

# Extension (lower-case) -> MIME type for auto-detection
MIME_TYPES = {
    ".ico": "image/x-icon",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}

# macOS AppleDouble sidecar files
METADATA_PREFIX = "._"

HTML_SUFFIX = ".html"

PARSER = "html.parser"

# Elements that go into a synthesized <head> when the source omits <html>
HEAD_TAGS = frozenset({"base", "link", "meta", "script", "style", "template", "title"})
