"""Modifier namespace: ``as_.Optional``, ``as_.Required``, ``as_.Readonly``."""

from __future__ import annotations

from shapeguard.modifiers import make_optional, make_readonly, make_required

Optional = make_optional
Required = make_required
Readonly = make_readonly

__all__ = ["Optional", "Readonly", "Required"]
