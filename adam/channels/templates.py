"""Success and error message templates keyed by channel."""

from __future__ import annotations

from collections.abc import Mapping


class ResponseTemplateStore:
    """Resolve the success/error wording used when rendering results."""

    _DEFAULT_TEMPLATES: Mapping[str, Mapping[str, str]] = {
        "voice": {
            "success": "Your request has been completed successfully.",
            "error": "I'm sorry, I ran into a problem:",
        },
        "chat": {
            "success": "✅ Done! Here's what I accomplished:",
            "error": "❌ Sorry, I couldn't complete that request:",
        },
        "admin": {
            "success": "Command executed successfully.",
            "error": "Command execution failed.",
        },
        "default": {
            "success": "Request completed.",
            "error": "Request failed.",
        },
    }

    def __init__(self, extra_templates: Mapping[str, Mapping[str, str]] | None = None):
        self._templates: dict[str, dict[str, str]] = {
            key: dict(value) for key, value in self._DEFAULT_TEMPLATES.items()
        }
        if extra_templates:
            for channel, mapping in extra_templates.items():
                merged = self._templates.setdefault(channel.lower(), {})
                merged.update(mapping)

    def _resolve(self, channel: str, kind: str) -> str:
        templates = self._templates.get(channel.lower(), {})
        if kind in templates:
            return templates[kind]
        return self._templates["default"][kind]

    def success(self, channel: str) -> str:
        """Return the success template for ``channel`` (``default`` fallback)."""

        return self._resolve(channel, "success")

    def error(self, channel: str) -> str:
        """Return the error template for ``channel`` (``default`` fallback)."""

        return self._resolve(channel, "error")
