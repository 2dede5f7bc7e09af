# core/configuration.py
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from core.domain.model import FinancialInputs

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"


def _leer_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"No existe config: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config inválida (debe ser dict): {path}")
    return data


@dataclass(frozen=True)
class EngineConfig:
    financial: Dict[str, Any]
    visualization: Dict[str, Any]

    @property
    def animation_period_ms(self) -> float:
        return float((self.visualization.get("animation") or {}).get("period_ms", 1000))

    @property
    def panel_style(self) -> Dict[str, Any]:
        return dict(self.visualization.get("panels") or {})


def load_configuration(config_dir: Optional[Path] = None) -> EngineConfig:
    base = Path(config_dir) if config_dir else CONFIG_DIR
    financial = _leer_yaml(base / "financial_defaults.yaml")
    visualization = _leer_yaml(base / "visualization.yaml")
    logger.debug("Configuración cargada desde %s", base)
    return EngineConfig(financial=financial, visualization=visualization)


def build_effective_config(cfg_base: EngineConfig, overrides: Optional[dict]) -> EngineConfig:
    if not overrides:
        return cfg_base
    fin = {**cfg_base.financial, **(overrides.get("financial") or {})}
    vis = {**cfg_base.visualization, **(overrides.get("visualization") or {})}
    return EngineConfig(financial=fin, visualization=vis)


def default_financial_inputs(cfg: EngineConfig) -> FinancialInputs:
    known = {f.name for f in fields(FinancialInputs)}
    unknown = sorted(set(cfg.financial) - known)
    if unknown:
        raise ValueError(f"Claves financieras desconocidas: {unknown}")

    values: Dict[str, Any] = {}
    for k, v in cfg.financial.items():
        try:
            values[k] = int(v) if k == "lifespan_years" else float(v)
        except (TypeError, ValueError) as e:
            raise ValueError(f"'{k}' debe ser numérico. Valor={v!r}") from e
    return FinancialInputs(**values)
