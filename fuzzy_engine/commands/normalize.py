from __future__ import annotations

from typing import Optional

from ..config import Settings
from ..core import NormalizationConfig, normalize


def run(settings: Settings, text: str, *, preset: Optional[str] = None) -> str:
    if preset:
        config = NormalizationConfig.preset(preset)
    else:
        config = settings.normalization.to_config()
    result = normalize(text, config)
    print(result)
    return result
