"""Configuration loader: reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .assertions import is_address
from .chains.networks import NETWORKS

logger = logging.getLogger(__name__)

GAS_ORACLES = ("ethgasstation", "gasnow")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int = 1
    rpc_url: str = "http://localhost:8545"
    rpc_timeout: int = 30


@dataclass(frozen=True)
class ContractsConfig:
    controller: str = ""
    set_token_creator: str = ""
    basic_issuance_module: str = ""
    streaming_fee_module: str = ""
    trade_module: str = ""
    protocol_viewer: str = ""


@dataclass(frozen=True)
class ApiConfig:
    zero_ex_api_key: str = ""
    zero_ex_api_urls: dict[int, str] = field(default_factory=dict)
    coingecko_url: str = "https://api.coingecko.com/api/v3"
    coingecko_token_list_url: str = "https://tokens.coingecko.com/uniswap/all.json"
    gas_oracle: str = "ethgasstation"
    gas_tier: str = "fast"
    http_timeout: int = 30


@dataclass(frozen=True)
class TradeQuoteConfig:
    exchange_adapter_name: str = "ZeroExApiAdapterV3"
    slippage_percentage: float = 2.0
    fee_percentage: float = 0.0
    fee_recipient: str = ""
    gas_buffer_percentage: int = 5
    is_firm_quote: bool = True


@dataclass(frozen=True)
class AppConfig:
    chain: ChainConfig = field(default_factory=ChainConfig)
    contracts: ContractsConfig = field(default_factory=ContractsConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    trade_quote: TradeQuoteConfig = field(default_factory=TradeQuoteConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_chain(raw: dict[str, Any]) -> ChainConfig:
    return ChainConfig(
        chain_id=int(raw.get("chain_id", 1)),
        rpc_url=raw.get("rpc_url", ChainConfig.rpc_url),
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
    )


def _build_contracts(raw: dict[str, Any]) -> ContractsConfig:
    return ContractsConfig(
        controller=raw.get("controller", ""),
        set_token_creator=raw.get("set_token_creator", ""),
        basic_issuance_module=raw.get("basic_issuance_module", ""),
        streaming_fee_module=raw.get("streaming_fee_module", ""),
        trade_module=raw.get("trade_module", ""),
        protocol_viewer=raw.get("protocol_viewer", ""),
    )


def _build_api(raw: dict[str, Any]) -> ApiConfig:
    zero_ex_urls = {
        int(chain_id): url
        for chain_id, url in (raw.get("zero_ex_api_urls") or {}).items()
    }
    return ApiConfig(
        zero_ex_api_key=raw.get("zero_ex_api_key", ""),
        zero_ex_api_urls=zero_ex_urls,
        coingecko_url=raw.get("coingecko_url", ApiConfig.coingecko_url),
        coingecko_token_list_url=raw.get(
            "coingecko_token_list_url", ApiConfig.coingecko_token_list_url
        ),
        gas_oracle=raw.get("gas_oracle", "ethgasstation"),
        gas_tier=raw.get("gas_tier", "fast"),
        http_timeout=int(raw.get("http_timeout", 30)),
    )


def _build_trade_quote(raw: dict[str, Any]) -> TradeQuoteConfig:
    return TradeQuoteConfig(
        exchange_adapter_name=raw.get(
            "exchange_adapter_name", TradeQuoteConfig.exchange_adapter_name
        ),
        slippage_percentage=float(raw.get("slippage_percentage", 2.0)),
        fee_percentage=float(raw.get("fee_percentage", 0.0)),
        fee_recipient=raw.get("fee_recipient", ""),
        gas_buffer_percentage=int(raw.get("gas_buffer_percentage", 5)),
        is_firm_quote=bool(raw.get("is_firm_quote", True)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate client configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        chain=_build_chain(raw.get("chain", {})),
        contracts=_build_contracts(raw.get("contracts", {})),
        api=_build_api(raw.get("api", {})),
        trade_quote=_build_trade_quote(raw.get("trade_quote", {})),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.chain.rpc_url:
        raise ValueError("chain.rpc_url must be configured")

    if cfg.chain.chain_id not in NETWORKS:
        raise ValueError(f"Unsupported chain id {cfg.chain.chain_id}")

    for name, address in vars(cfg.contracts).items():
        # Unset contracts are allowed; the APIs that need them fail on use.
        if address and not is_address(address):
            raise ValueError(f"Contract '{name}' has malformed address '{address}'")

    if cfg.trade_quote.fee_recipient and not is_address(cfg.trade_quote.fee_recipient):
        raise ValueError("trade_quote.fee_recipient is not a valid address")

    if cfg.api.gas_oracle not in GAS_ORACLES:
        raise ValueError(f"Unknown gas oracle '{cfg.api.gas_oracle}'")
