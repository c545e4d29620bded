# backend/routers/measurement_router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from gateway.error_handlers import server_error
from schemas.common import success_response
from schemas.orders import MeasurementSubmission
from services.address_repository import AddressRepository
from services.auth_service import CurrentUser, get_current_user
from services.dependencies import (
    get_address_repository, get_measurement_repository, get_order_repository, get_user_repository,
)
from services.measurement_repository import MeasurementRepository
from services.measurement_service import get_measurement_boy_orders, submit_measurements
from services.order_repository import OrderRepository
from services.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/measurement-boy", tags=["measurements"])


@router.get("/orders")
def measurement_boy_orders(is_done: Optional[int] = Query(None, alias="isOrderMeasurementDone", ge=0, le=1),
                           current: CurrentUser = Depends(get_current_user),
                           users: UserRepository = Depends(get_user_repository),
                           orders: OrderRepository = Depends(get_order_repository),
                           addresses: AddressRepository = Depends(get_address_repository),
                           measurements: MeasurementRepository = Depends(get_measurement_repository)):
    try:
        rows = get_measurement_boy_orders(
            current.userId, None if is_done is None else bool(is_done),
            users, orders, addresses, measurements,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching measurement orders for user %s", current.userId)
        raise server_error("Failed to retrieve measurement orders", e)
    return success_response("Measurement orders retrieved successfully", data=rows, count=len(rows))


@router.post("/submit-measurement", status_code=201)
def submit_measurement(body: Optional[MeasurementSubmission] = None,
                       current: CurrentUser = Depends(get_current_user),
                       users: UserRepository = Depends(get_user_repository),
                       orders: OrderRepository = Depends(get_order_repository),
                       measurements: MeasurementRepository = Depends(get_measurement_repository)):
    try:
        result = submit_measurements(
            current.userId, body.measurements if body else None, users, orders, measurements,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error submitting measurements")
        raise server_error("Failed to submit measurements", e)

    warnings = result.pop("warnings", None)
    return success_response(
        f"{result['totalMeasurements']} measurement(s) saved successfully",
        data=result,
        warnings=warnings,
    )
