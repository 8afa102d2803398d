from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse

from goapi.config import ResolverConfig
from goapi.errors import GoExportsError, PackageNotFoundError
from goapi.resolve import PackageResolver
from goapi.summarize import summarize_package


logger = logging.getLogger(__name__)

app = FastAPI(title="Go Exports")


@app.get("/exports", response_class=PlainTextResponse)
def exports(path: str = Query(..., description="Go package import path")) -> str:
	resolver = PackageResolver(ResolverConfig.from_env(), os.getcwd())
	try:
		pkg = resolver.resolve(path)
		lines = summarize_package(pkg)
	except PackageNotFoundError as e:
		raise HTTPException(status_code=404, detail=str(e))
	except GoExportsError as e:
		logger.error("%s", e)
		raise HTTPException(status_code=500, detail=str(e))
	return "".join(line + "\n" for line in lines)
