"""Feature-Policy header value, built once at startup."""

# Features the site never uses, in any environment
_DISABLED = (
    "accelerometer",
    "camera",
    "geolocation",
    "gyroscope",
    "magnetometer",
    "microphone",
    "midi",
    "payment",
    "usb",
    "vr",
)


def feature_policy(prod: bool) -> str:
    directives = [f"{feature} 'none'" for feature in _DISABLED]
    directives.append("fullscreen 'self' https://www.youtube.com")
    directives.append("sync-xhr 'self'")
    if prod:
        # prod only: the dev server injects scripts via document.write
        directives.append("document-write 'none'")
    return "; ".join(directives)
