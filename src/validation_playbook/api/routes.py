"""
API route definitions.

This module defines the HTTP endpoints:
- /users, /products, /employees - create / list / fetch example records
- POST /validate/{model_name} - validation report for any registered model
- POST /parse/{model_name} - parsed record, or 422 with the flattened errors
- GET /reference/{model_name} - markdown reference of a model
- /onboarding - start, inspect and resume onboarding workflow runs
"""

from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Response
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from validation_playbook.api.dependencies import get_runner, get_settings_dep, get_store_dep
from validation_playbook.docs import render_model_reference
from validation_playbook.models import (
    Config,
    Employee,
    EmployeeCreate,
    Product,
    ProductCreate,
    User,
    UserCreate,
)
from validation_playbook.nodes.reviewer import ReviewInput
from validation_playbook.registry import ModelRegistry
from validation_playbook.runner import OnboardingRunner, OnboardingStatus
from validation_playbook.store import Store
from validation_playbook.validation import ValidationReport, parse_or_raise, validate_payload

router = APIRouter()

StoreDep = Annotated[Store, Depends(get_store_dep)]
RunnerDep = Annotated[OnboardingRunner, Depends(get_runner)]
RecordId = Annotated[int, Path(gt=0, description="Record id (starts at 1)")]
ModelName = Annotated[str, Path(min_length=1, description="Registered model name, e.g. 'user'")]


class CorrectionInput(BaseModel):
    """Resume value for a correction_request interrupt."""
    raw_payload: Dict[str, Any]
    note: Optional[str] = None


# --- Health & Config ---

@router.get("/ping")
async def ping():
    """Health check endpoint."""
    return {"message": "pong"}


@router.get("/config", response_model=Config)
async def read_config(settings: Annotated[Config, Depends(get_settings_dep)]):
    return settings


# --- Users ---

@router.post("/users", response_model=User, status_code=201)
async def create_user(user: UserCreate, store: StoreDep):
    return store.users.add(user)


@router.get("/users", response_model=List[User])
async def list_users(
    store: StoreDep,
    active: Annotated[Optional[bool], Query(description="Filter on is_active")] = None,
):
    return store.users.list(is_active=active)


@router.get("/users/{user_id}", response_model=User)
async def get_user(user_id: RecordId, store: StoreDep):
    user = store.users.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user


# --- Products ---

@router.post("/products", response_model=Product, status_code=201)
async def create_product(product: ProductCreate, store: StoreDep):
    return store.products.add(product)


@router.get("/products", response_model=List[Product])
async def list_products(
    store: StoreDep,
    min_price: Annotated[Optional[float], Query(ge=0)] = None,
    max_price: Annotated[Optional[float], Query(ge=0)] = None,
    tag: Annotated[Optional[str], Query(min_length=1)] = None,
):
    if min_price is not None and max_price is not None and min_price > max_price:
        raise HTTPException(status_code=400, detail="min_price must not exceed max_price")

    products = store.products.list()
    if min_price is not None:
        products = [p for p in products if p.price >= min_price]
    if max_price is not None:
        products = [p for p in products if p.price <= max_price]
    if tag is not None:
        products = [p for p in products if tag.strip().lower() in p.tags]
    return products


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: RecordId, store: StoreDep):
    product = store.products.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product


# --- Employees ---

@router.post("/employees", response_model=Employee, status_code=201)
async def create_employee(employee: EmployeeCreate, store: StoreDep):
    return store.employees.add(employee)


@router.get("/employees", response_model=List[Employee])
async def list_employees(
    store: StoreDep,
    department: Annotated[Optional[str], Query(min_length=1)] = None,
):
    return store.employees.list(department=department)


# --- Models & Validation ---

@router.get("/models")
async def list_models():
    return {"models": ModelRegistry.list_models()}


@router.post("/validate/{model_name}", response_model=ValidationReport)
async def validate_model(model_name: ModelName, payload: Annotated[Any, Body()] = None):
    """Always 200: the report says whether the payload is valid."""
    model_cls = ModelRegistry.get_model(model_name)
    return validate_payload(model_cls, payload)


@router.post("/parse/{model_name}")
async def parse_model(model_name: ModelName, payload: Annotated[Any, Body()] = None):
    """Returns the parsed record, or 422 with the flattened errors."""
    model_cls = ModelRegistry.get_model(model_name)
    return parse_or_raise(model_cls, payload).model_dump(mode="json")


@router.get("/reference/{model_name}")
async def model_reference(model_name: ModelName):
    model_cls = ModelRegistry.get_model(model_name)
    return Response(content=render_model_reference(model_cls), media_type="text/markdown")


# --- Onboarding Workflow ---

@router.post("/onboarding", response_model=OnboardingStatus, status_code=202)
async def start_onboarding(payload: Annotated[Dict[str, Any], Body()], runner: RunnerDep):
    """Starts a run; invalid payloads are accepted and parked at correction_request."""
    return await run_in_threadpool(runner.start, payload)


@router.get("/onboarding/{thread_id}", response_model=OnboardingStatus)
async def onboarding_status(thread_id: str, runner: RunnerDep):
    return await run_in_threadpool(runner.status, thread_id)


@router.post("/onboarding/{thread_id}/corrections", response_model=OnboardingStatus)
async def submit_correction(thread_id: str, correction: CorrectionInput, runner: RunnerDep):
    return await run_in_threadpool(runner.submit_correction, thread_id, correction.raw_payload, correction.note)


@router.post("/onboarding/{thread_id}/review", response_model=OnboardingStatus)
async def review_onboarding(thread_id: str, review: ReviewInput, runner: RunnerDep):
    return await run_in_threadpool(runner.review, thread_id, review.decision.value, review.comment)
