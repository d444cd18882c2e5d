#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-
# SPDX-License-Identifier: BSD-3-Clause


from typing import ClassVar, Literal, Self
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__: list[str] = ['Settings', 'SettingsModel']


LogLevel = Literal['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR']


class SettingsModel(BaseSettings):
    DEBUG: bool = False
    """Trace forcing and log errors before raising them."""
    
    MEMOIZE: bool = False
    """Every stream node caches its `(head, tail)` cell once forced."""
    
    LOG_LEVEL: LogLevel = 'INFO'
    """Level of the loguru sink installed by the example CLI."""
    
    model_config = SettingsConfigDict(
        env_prefix = 'INFINITA_',
        env_file   = '.env',
        extra      = 'ignore'
    )


class Settings:
    """Process-wide settings, read from `INFINITA_*` env vars and `.env`.
    
    Modules capture what they need into `Final` constants at import time,
    so `reload()` only affects modules imported afterwards."""
    __singleton__: ClassVar[SettingsModel]

    def __new__(cls: type[Self]) -> SettingsModel:
        if not hasattr(cls, '__singleton__') or not cls.__singleton__:
            cls.__singleton__ = SettingsModel()
        return cls.__singleton__
    
    @classmethod
    def reload(cls: type[Self]) -> SettingsModel:
        cls.__singleton__ = SettingsModel()
        return cls.__singleton__
