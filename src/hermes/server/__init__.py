"""Server — ASGI dispatch, response sending and the listening entry point."""
