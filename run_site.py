#!/usr/bin/env python3
"""Chrome Dev Summit — conference site.

Launch: python3 run_site.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import uvicorn

from devsummit.config import HOST, IS_PROD, PORT, SITE_ENV


def main():
    print("=" * 60)
    print("  Chrome Dev Summit")
    print("=" * 60)

    if not IS_PROD:
        print(f"\n  SITE_ENV={SITE_ENV}: serving /static and /src from source,")
        print("  AMP CSS is re-rendered from LESS on every request.\n")

    url = f"http://{HOST}:{PORT}"
    print(f"  Site: {url}")
    print("  Press Ctrl+C to stop\n")

    from devsummit.app import create_app
    app = create_app()
    uvicorn.run(app, host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
