"""
Run the document service with uvicorn.

Usage:
    python -m docmaker
    python -m docmaker --port 8080 --storage-root /var/tmp/docs
    python -m docmaker --base-url https://docs.example.com/download

Command line options override the PORT, STORAGE_ROOT and BASE_URL
environment variables.
"""

import argparse
import os

import uvicorn

from docmaker.dependencies import get_port


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve CSV and XLSX document generation over HTTP"
    )
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on (default: 3000)")
    parser.add_argument("--storage-root", help="Directory for generated files")
    parser.add_argument("--base-url", help="URL prefix for download links")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Dependencies read settings from the environment on every request
    if args.port is not None:
        os.environ["PORT"] = str(args.port)
    if args.storage_root:
        os.environ["STORAGE_ROOT"] = args.storage_root
    if args.base_url:
        os.environ["BASE_URL"] = args.base_url

    uvicorn.run("docmaker.main:app", host=args.host, port=get_port())


if __name__ == "__main__":
    main()
