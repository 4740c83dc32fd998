from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from loyalty.domain.orders.entities import Order, SubmitOrderResult


class OrderDTO(BaseModel):
    number: str
    status: str
    accrual: float | None = None
    uploaded_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> OrderDTO:
        return cls(
            number=order.number,
            status=order.status.value,
            accrual=order.accrual,
            uploaded_at=order.uploaded_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class OrderSubmittedDTO(BaseModel):
    number: str
    result: SubmitOrderResult
