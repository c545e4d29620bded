# backend/routers/business_router.py
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile

from gateway.error_handlers import server_error
from queries.sql_template import UnknownColumnError
from schemas.business import BusinessPayload, BusinessUpdate, TailorAvailabilityIn, TailorItemPricesPayload
from schemas.common import success_response
from services.auth_service import CurrentUser, get_current_user
from services.business_repository import BusinessRepository
from services.business_service import save_business, sync_item_prices, update_business
from services.dependencies import get_business_repository
from services.upload_service import UploadService, get_upload_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["business"])


def _business_or_404(repo: BusinessRepository, business_id: int):
    business = repo.get_business_by_id(business_id)
    if not business:
        raise HTTPException(status_code=404, detail="Business not found")
    return business


@router.get("/business/{user_id}")
def get_business(user_id: int,
                 current: CurrentUser = Depends(get_current_user),
                 repo: BusinessRepository = Depends(get_business_repository)):
    business = repo.get_business_by_user_id(user_id)
    if not business:
        raise HTTPException(status_code=404, detail="Business information not found")
    return success_response("Business information retrieved successfully", data=business)


@router.get("/businesses")
def get_all_businesses(current: CurrentUser = Depends(get_current_user),
                       repo: BusinessRepository = Depends(get_business_repository)):
    try:
        rows = repo.get_all_businesses()
        return success_response("Businesses retrieved successfully", data=rows, count=len(rows))
    except Exception as e:
        logger.exception("Error fetching businesses")
        raise server_error("Failed to retrieve businesses", e)


@router.post("/business")
def create_or_update_business(body: BusinessPayload, response: Response,
                              current: CurrentUser = Depends(get_current_user),
                              repo: BusinessRepository = Depends(get_business_repository)):
    user_id = body.userId or current.userId
    try:
        created, business = save_business(body, user_id, repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error saving business for user %s", user_id)
        raise server_error("Failed to save business information", e)

    if created:
        response.status_code = 201
        return success_response("Business information created successfully", data=business)
    return success_response("Business information updated successfully", data=business)


@router.put("/business/{business_id}")
def update_business_by_id(business_id: int, body: BusinessUpdate,
                          current: CurrentUser = Depends(get_current_user),
                          repo: BusinessRepository = Depends(get_business_repository)):
    try:
        result = update_business(business_id, body, repo)
    except (HTTPException, UnknownColumnError):
        raise
    except Exception as e:
        logger.exception("Error updating business %s", business_id)
        raise server_error("Failed to update business information", e)

    return success_response(
        "Business information updated successfully",
        data=result["business"],
        tailorItemPrices=result["tailorItemPrices"],
        warnings=result["warnings"],
    )


@router.post("/business/{business_id}/upload-logo")
def upload_logo(business_id: int,
                logo: Optional[UploadFile] = File(None),
                current: CurrentUser = Depends(get_current_user),
                repo: BusinessRepository = Depends(get_business_repository),
                uploads: UploadService = Depends(get_upload_service)):
    if logo is None or not logo.filename:
        raise HTTPException(status_code=400, detail="No logo file uploaded")
    _business_or_404(repo, business_id)

    saved = uploads.save_image(logo, "business", business_id)
    result = repo.update_business_logo(business_id, saved["url"])
    if result.affected == 0:
        uploads.delete_file(saved["url"])
        raise HTTPException(status_code=404, detail="Business not found")
    return success_response("Logo uploaded successfully",
                            data={"businessId": business_id, "businessLogo": saved["url"]})


@router.delete("/business/{user_id}")
def delete_business(user_id: int,
                    current: CurrentUser = Depends(get_current_user),
                    repo: BusinessRepository = Depends(get_business_repository)):
    result = repo.delete_business_information(user_id)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Business information not found")
    return success_response("Business information deleted successfully")


# ---------- tailor availability ----------

@router.get("/business/{business_id}/availability")
def get_availability(business_id: int,
                     from_date: Optional[date] = Query(None, alias="from"),
                     to_date: Optional[date] = Query(None, alias="to"),
                     current: CurrentUser = Depends(get_current_user),
                     repo: BusinessRepository = Depends(get_business_repository)):
    rows = repo.get_tailor_availability(business_id, from_date, to_date)
    return success_response("Availability retrieved successfully", data=rows, count=len(rows))


@router.post("/business/{business_id}/availability")
def upsert_availability(business_id: int, body: TailorAvailabilityIn, response: Response,
                        current: CurrentUser = Depends(get_current_user),
                        repo: BusinessRepository = Depends(get_business_repository)):
    _business_or_404(repo, business_id)
    result = repo.upsert_tailor_availability(business_id, body.availabilityDate, body.isClosed)
    if result["action"] == "inserted":
        response.status_code = 201
    return success_response(
        f"Availability {result['action']} successfully",
        data=dict(result, businessId=business_id,
                  availabilityDate=body.availabilityDate, isClosed=body.isClosed),
    )


# ---------- tailor item prices ----------

@router.get("/business/{business_id}/item-prices")
def get_item_prices(business_id: int,
                    current: CurrentUser = Depends(get_current_user),
                    repo: BusinessRepository = Depends(get_business_repository)):
    rows = repo.get_tailor_item_prices(business_id)
    return success_response("Tailor item prices retrieved successfully", data=rows, count=len(rows))


@router.post("/business/{business_id}/item-prices")
def upsert_item_prices(business_id: int, body: TailorItemPricesPayload,
                       current: CurrentUser = Depends(get_current_user),
                       repo: BusinessRepository = Depends(get_business_repository)):
    _business_or_404(repo, business_id)
    items = [item.model_dump() for item in body.tailorItemPrices]
    results, warnings = sync_item_prices(repo, business_id, items)
    return success_response("Tailor item prices saved", data=results, count=len(results), warnings=warnings)
