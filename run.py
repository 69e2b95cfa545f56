#!/usr/bin/env python3
"""
Starts the Veerji compiler web API.
"""
import logging
import sys

import config

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("Veerji Compiler API")
    print("=" * 50)
    print(f"Serving on http://{config.SERVER_HOST}:{config.SERVER_PORT}")

    import uvicorn
    try:
        uvicorn.run("main:app", host=config.SERVER_HOST, port=config.SERVER_PORT)
    except KeyboardInterrupt:
        print("\nServer stopped.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
