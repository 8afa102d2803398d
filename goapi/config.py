from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel


LOG_LEVEL_ENV = "GOEXPORTS_LOG_LEVEL"


def default_gopath(env: Mapping[str, str]) -> str:
	"""Mirror the Go toolchain: $GOPATH, else $HOME/go."""
	if env.get("GOPATH"):
		return env["GOPATH"]
	home = env.get("HOME") or env.get("USERPROFILE", "")
	if not home:
		return ""
	return os.path.join(home, "go")


def module_cache_root(env: Mapping[str, str]) -> Optional[str]:
	gomodcache = env.get("GOMODCACHE", "")
	if gomodcache:
		return gomodcache
	entries = default_gopath(env).split(os.pathsep)
	if not entries or not entries[0]:
		return None
	return os.path.join(entries[0], "pkg", "mod")


class ResolverConfig(BaseModel):
	mod_cache: Optional[str] = None
	go_binary: str = "go"

	@classmethod
	def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
		env = os.environ if env is None else env
		return cls(mod_cache=module_cache_root(env))
