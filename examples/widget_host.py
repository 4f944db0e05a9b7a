"""
widget_host.py — Minimal edgechat host.

Serves the chat API with a canned model so the response cache can be
exercised without a hosted model. Repeat the same request and the second
reply comes back with ``"cached": true``.

Usage:
    export EDGECHAT_CACHE_MODE=weight
    python examples/widget_host.py
    curl -X POST localhost:8000/api/chat -H 'content-type: application/json' \\
         -d '{"message": "hello"}'
"""

from edgechat.server import build_app


class EchoModel:
    async def complete(self, turns, *, reference=None):
        return f"You said: {turns[-1].content}"

    async def welcome(self, site):
        return f"Hi! Ask me anything about {site or 'this site'}."


app = build_app(model=EchoModel())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
