import sys

from prisma_arktype.rpc.generator import serve


def generator() -> None:
    """Run as a Prisma generator (JSON-RPC over stdin/stderr)."""
    serve(sys.stdin, sys.stderr)
