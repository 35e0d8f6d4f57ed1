from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import yaml

from .clean import CleaningProfile, profile_from_cfg
from .errors import ConfigurationError
from .matrix import Bounds, bounds_from_cfg

SOURCE_KINDS = ('texts', 'directory', 'csv')


@dataclass(frozen=True)
class SourceConfig:
    kind: str = 'texts'
    path: Optional[str] = None
    column: str = 'text'
    pattern: str = '*.txt'
    texts: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReportConfig:
    top_k: int = 10
    min_count: int = 2
    # term -> minimum correlation
    associations: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class PipelineConfig:
    source: SourceConfig = field(default_factory=SourceConfig)
    cleaning: CleaningProfile = field(default_factory=CleaningProfile)
    ngram: int = 1
    bounds: Optional[Bounds] = None
    sparse: Optional[float] = None
    report: ReportConfig = field(default_factory=ReportConfig)


def source_from_cfg(cfg: Dict) -> SourceConfig:
    cfg = cfg or {}
    kind = str(cfg.get('kind', 'texts'))
    if kind not in SOURCE_KINDS:
        raise ConfigurationError(f"Unknown source kind: {kind}")
    path = cfg.get('path')
    if kind != 'texts' and not path:
        raise ConfigurationError(f"source kind {kind!r} needs a path")
    return SourceConfig(
        kind=kind,
        path=None if path is None else str(path),
        column=str(cfg.get('column', 'text')),
        pattern=str(cfg.get('pattern', '*.txt')),
        texts=tuple(str(t) for t in (cfg.get('texts') or [])),
    )


def report_from_cfg(cfg: Dict) -> ReportConfig:
    cfg = cfg or {}
    top_k = int(cfg.get('top_k', 10))
    if top_k < 0:
        raise ConfigurationError(f"top_k must be >= 0, got {top_k}")
    return ReportConfig(
        top_k=top_k,
        min_count=int(cfg.get('min_count', 2)),
        associations={str(k): float(v) for k, v in (cfg.get('associations') or {}).items()},
    )


def config_from_cfg(cfg: Dict) -> PipelineConfig:
    cfg = cfg or {}
    ngram = int(cfg.get('ngram', 1))
    if ngram < 1:
        raise ConfigurationError(f"ngram must be >= 1, got {ngram}")
    sparse = cfg.get('sparse')
    if sparse is not None and not 0 < float(sparse) < 1:
        raise ConfigurationError(f"sparse must be in (0, 1), got {sparse}")
    return PipelineConfig(
        source=source_from_cfg(cfg.get('source')),
        cleaning=profile_from_cfg(cfg.get('cleaning')),
        ngram=ngram,
        bounds=bounds_from_cfg(cfg['bounds']) if cfg.get('bounds') else None,
        sparse=None if sparse is None else float(sparse),
        report=report_from_cfg(cfg.get('report')),
    )


def load_config(path: Union[str, Path]) -> PipelineConfig:
    raw = yaml.safe_load(Path(path).read_text(encoding='utf-8'))
    return config_from_cfg(raw)
