"""Merge the three configuration layers into one InternalConfig.

Layers, lowest to highest precedence: ParamConfig defaults, the user
file (UserConfig), command-line flags (CLIConfig).
"""

from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel

from grovegrid.schemas.cli import CLIConfig
from grovegrid.schemas.internal import InternalConfig
from grovegrid.schemas.param import ParamConfig
from grovegrid.schemas.user import UserConfig

ModelT = TypeVar("ModelT", bound=BaseModel)


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Return ``base`` with each override applied in turn.

    Nested dicts merge key by key; any other value replaces what was there.

    >>> deep_merge({"output": {"out_dir": "a", "json_indent": 2}}, {"output": {"out_dir": "b"}})
    {'output': {'out_dir': 'b', 'json_indent': 2}}
    """
    result = dict(base)
    for override in overrides:
        for key, value in override.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                result[key] = deep_merge(current, value)
            else:
                result[key] = value
    return result


def _as_model(model: Type[ModelT], cfg: Optional[Union[dict, ModelT]]) -> ModelT:
    if isinstance(cfg, model):
        return cfg
    return model.model_validate(cfg or {})


def resolve_config(
    param_cfg: Union[dict, ParamConfig],
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Validate each layer, merge them and freeze the result.

    Any layer may be given as a model or a plain dict; ``None`` means no
    overrides from that layer.

    Raises
    ------
    pydantic.ValidationError
        If a layer or the merged result fails validation.

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(TITLE="Orchard"))
    >>> config.render.title
    'Orchard'
    """
    param = _as_model(ParamConfig, param_cfg)
    user = _as_model(UserConfig, user_cfg)
    cli = _as_model(CLIConfig, cli_cfg)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        cli.to_internal_overrides(),
    )
    return InternalConfig.model_validate(merged)
