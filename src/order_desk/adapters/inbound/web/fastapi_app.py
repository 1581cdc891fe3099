from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from fastapi import FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from order_desk.bootstrap import UseCases
from order_desk.core.domain.model.errors import (
    DuplicateKey,
    OrderError,
    OrderNotFound,
    ValidationError,
)
from order_desk.core.ports.inbound.add_order import AddOrderCommand, AddOrderLine
from order_desk.core.ports.inbound.delete_order import DeleteOrderCommand
from order_desk.core.ports.inbound.get_order import GetOrderQuery, OrderView
from order_desk.core.ports.inbound.query_orders import QueryOrdersQuery
from order_desk.core.ports.inbound.update_order import UpdateOrderCommand

logger = logging.getLogger(__name__)

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class OrderLineIn(BaseModel):
    product_name: str = Field(examples=["Pen"])
    amount: float = Field(allow_inf_nan=False, examples=[3.5])


class AddOrderRequest(BaseModel):
    order_id: str = Field(min_length=1, examples=["O1"])
    customer: str = Field(examples=["Alice"])
    lines: list[OrderLineIn] = Field(default_factory=list)


class UpdateOrderRequest(BaseModel):
    customer: str = Field(examples=["Bob"])


class OrderLineOut(BaseModel):
    product_name: str
    amount: float


class OrderResponse(BaseModel):
    order_id: str
    customer: str
    total: float
    lines: list[OrderLineOut]


class OrderListResponse(BaseModel):
    items: list[OrderResponse]


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


def _map_error_to_http(err: OrderError) -> tuple[int, ErrorResponse]:
    body = ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, ValidationError):
        return 400, body

    if isinstance(err, OrderNotFound):
        return 404, body

    if isinstance(err, DuplicateKey):
        return 409, body

    return 500, body


def _to_response(view: OrderView) -> OrderResponse:
    return OrderResponse(
        order_id=view.order_id.value,
        customer=view.customer.value,
        total=view.total,
        lines=[
            OrderLineOut(product_name=ln.product_name, amount=ln.amount)
            for ln in view.lines
        ],
    )


def create_app(usecases: UseCases) -> FastAPI:
    app = FastAPI(title="order_desk")

    # --- exception handlers ------------------------------------------------

    @app.exception_handler(OrderError)
    async def handle_domain_error(_: Request, exc: OrderError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error")
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- routes --------------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/orders",
        response_model=OrderResponse,
        status_code=201,
        responses={
            400: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
        },
    )
    def add_order(req: AddOrderRequest, response: Response) -> Any:
        result = usecases.add_order.add_order(
            AddOrderCommand(
                order_id=req.order_id,
                customer=req.customer,
                lines=tuple(
                    AddOrderLine(product_name=ln.product_name, amount=ln.amount)
                    for ln in req.lines
                ),
            )
        )

        if isinstance(result, Success):
            view = result.unwrap()
            location = quote(view.order_id.value, safe="")
            response.headers["Location"] = f"/orders/{location}"
            return _to_response(view)

        raise result.failure()

    @app.get(
        "/orders",
        response_model=OrderListResponse,
        responses={400: {"model": ErrorResponse}},
    )
    def query_orders(
        keyword: str | None = Query(None),
        min_amount: float | None = Query(None),
        max_amount: float | None = Query(None),
    ) -> Any:
        result = usecases.query_orders.query_orders(
            QueryOrdersQuery(
                keyword=keyword, min_amount=min_amount, max_amount=max_amount
            )
        )

        if isinstance(result, Success):
            return OrderListResponse(items=[_to_response(v) for v in result.unwrap()])

        raise result.failure()

    @app.get(
        "/orders/{order_id:path}",
        response_model=OrderResponse,
        responses={404: {"model": ErrorResponse}},
    )
    def get_order(order_id: str) -> Any:
        result = usecases.get_order.get_order(GetOrderQuery(order_id=order_id))

        if isinstance(result, Success):
            return _to_response(result.unwrap())

        raise result.failure()

    @app.patch(
        "/orders/{order_id:path}",
        response_model=OrderResponse,
        responses={404: {"model": ErrorResponse}},
    )
    def update_order(order_id: str, req: UpdateOrderRequest) -> Any:
        result = usecases.update_order.update_order(
            UpdateOrderCommand(order_id=order_id, customer=req.customer)
        )

        if isinstance(result, Success):
            return _to_response(result.unwrap())

        raise result.failure()

    @app.delete(
        "/orders/{order_id:path}",
        status_code=204,
        responses={404: {"model": ErrorResponse}},
    )
    def delete_order(order_id: str) -> Response:
        result = usecases.delete_order.delete_order(
            DeleteOrderCommand(order_id=order_id)
        )

        if isinstance(result, Success):
            return Response(status_code=204)

        raise result.failure()

    return app
