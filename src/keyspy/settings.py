# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import dataclasses
import json
import pathlib
import typing

import cattrs
import cattrs.gen

from .eventtypes import ErrorCallback, InfoCallback

if typing.TYPE_CHECKING:
    from .backends import BackendKind

DEFAULT_APP_NAME = "KeySpy"


@dataclasses.dataclass(kw_only=True)
class BackendConfig:
    server_path: typing.Optional[pathlib.Path] = None
    app_name: typing.Optional[str] = None
    allow_escalation: bool = True
    on_error: typing.Optional[ErrorCallback] = dataclasses.field(default=None, repr=False, compare=False)
    on_info: typing.Optional[InfoCallback] = dataclasses.field(default=None, repr=False, compare=False)

    @property
    def display_name(self):
        return self.app_name or DEFAULT_APP_NAME


@dataclasses.dataclass(kw_only=True)
class Settings:
    windows: BackendConfig = dataclasses.field(default_factory=BackendConfig)
    mac: BackendConfig = dataclasses.field(default_factory=BackendConfig)
    x11: BackendConfig = dataclasses.field(default_factory=BackendConfig)
    # how long backends keep running after the last listener is removed
    dispose_delay: float = 0.1
    # how long a terminated key server gets to exit before it is killed
    stop_grace_period: float = 2.0

    def for_backend(self, kind: BackendKind) -> BackendConfig:
        return getattr(self, kind.value)

    def with_callbacks(
        self, *, on_error: typing.Optional[ErrorCallback] = None, on_info: typing.Optional[InfoCallback] = None
    ) -> Settings:
        def attach(config: BackendConfig):
            return dataclasses.replace(
                config,
                on_error=on_error if on_error is not None else config.on_error,
                on_info=on_info if on_info is not None else config.on_info,
            )

        return dataclasses.replace(self, windows=attach(self.windows), mac=attach(self.mac), x11=attach(self.x11))

    def save(self, dest: pathlib.Path):
        with dest.open("w") as outfile:
            json.dump(settings_converter.unstructure(self), outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        return settings_converter.structure(raw, cls)


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_structure_hook(
    BackendConfig,
    cattrs.gen.make_dict_structure_fn(
        BackendConfig,
        settings_converter,
        on_error=cattrs.gen.override(omit=True),
        on_info=cattrs.gen.override(omit=True),
    ),
)
settings_converter.register_unstructure_hook(
    BackendConfig,
    cattrs.gen.make_dict_unstructure_fn(
        BackendConfig,
        settings_converter,
        on_error=cattrs.gen.override(omit=True),
        on_info=cattrs.gen.override(omit=True),
    ),
)
