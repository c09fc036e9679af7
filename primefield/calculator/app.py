"""Calculator FastAPI application.

Each app instance owns one ``DynamicField``; every request is evaluated
in whatever field is active when it arrives.

Endpoints:
- GET  /health   – liveness probe
- GET  /modulus  – active modulus and word width
- PUT  /modulus  – switch to another prime modulus (400 if not prime)
- POST /eval     – evaluate one operation (400 on division by zero)

Run with:
    python -m primefield.calculator.app     (or: uvicorn primefield.calculator.app:app)
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from primefield.calculator.evaluate import BINARY_OPS, evaluate
from primefield.config import (
    LOG_FORMAT,
    LOG_LEVEL,
    SERVICE_HOST,
    SERVICE_MODULUS,
    SERVICE_PORT,
    SERVICE_WIDTH,
)
from primefield.gf.dynamic import DynamicField
from primefield.gf.errors import FieldZeroDivisionError, InvalidModulusError

logger = logging.getLogger(__name__)

# ------ request / response models ------


class ModulusRequest(BaseModel):
    modulus: int


class ModulusResponse(BaseModel):
    modulus: int
    width: int


class EvalRequest(BaseModel):
    op: Literal["add", "sub", "mul", "div", "pow", "inv", "neg"]
    a: int
    b: Optional[int] = None


class EvalResponse(BaseModel):
    op: str
    a: int
    b: Optional[int] = None
    result: int
    modulus: int


def create_app(field: DynamicField | None = None) -> FastAPI:
    """Factory that creates a calculator app.

    If *field* is not provided a new ``DynamicField`` is created on
    ``SERVICE_MODULUS`` / ``SERVICE_WIDTH``.
    """
    if field is None:
        field = DynamicField(SERVICE_MODULUS, SERVICE_WIDTH)

    app = FastAPI(title="primefield calculator")
    app.state.field = field

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/modulus", response_model=ModulusResponse)
    async def get_modulus():
        spec = field.spec
        return ModulusResponse(modulus=spec.modulus, width=spec.width)

    @app.put("/modulus", response_model=ModulusResponse)
    async def put_modulus(req: ModulusRequest):
        try:
            spec = field.set_modulus(req.modulus)
        except InvalidModulusError as exc:
            raise HTTPException(400, f"Invalid modulus: {exc}")
        return ModulusResponse(modulus=spec.modulus, width=spec.width)

    @app.post("/eval", response_model=EvalResponse)
    async def eval_op(req: EvalRequest):
        if req.op in BINARY_OPS and req.b is None:
            raise HTTPException(422, f"Operation '{req.op}' needs operand 'b'")
        try:
            result = evaluate(field, req.op, req.a, req.b)
        except FieldZeroDivisionError as exc:
            raise HTTPException(400, str(exc))
        except ValueError as exc:
            raise HTTPException(422, str(exc))
        logger.info({"action": "eval", "op": req.op, "a": req.a, "b": req.b, "result": result.value})
        return EvalResponse(op=req.op, a=req.a, b=req.b, result=result.value, modulus=result.modulus)

    return app


app = create_app()


def main() -> None:
    import uvicorn  # optional "serve" extra

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    uvicorn.run(app, host=SERVICE_HOST, port=SERVICE_PORT)


if __name__ == "__main__":
    main()
