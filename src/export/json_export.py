from __future__ import annotations

import json

from src.tokens.design_tokens import DesignConfig, DesignTokens


def export_to_json(config: DesignConfig, tokens: DesignTokens) -> str:
    """Serializa la configuración y el bundle juntos en un único documento."""
    payload = {"config": config.to_dict(), "tokens": tokens.to_dict()}
    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = ["export_to_json"]
