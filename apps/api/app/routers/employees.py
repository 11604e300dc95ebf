from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.routers.auth import get_current_caller
from app.schemas.auth import Caller
from app.schemas.employees import EmployeeCreate, EmployeeOut, EmployeeUpdate
from app.services.employee_service import EmployeeService

router = APIRouter(dependencies=[Depends(get_current_caller)])


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


@router.get("", response_model=list[EmployeeOut])
@router.get("/", response_model=list[EmployeeOut], include_in_schema=False)
def list_employees(
    q: Optional[str] = Query(default=None, description="Substring of name, email or document number"),
    service: EmployeeService = Depends(get_employee_service),
):
    return [EmployeeOut.from_employee(e) for e in service.list_employees(q)]


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    return EmployeeOut.from_employee(service.get_employee(employee_id))


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_employee(
    payload: EmployeeCreate,
    response: Response,
    caller: Caller = Depends(get_current_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    emp = service.create_employee(payload, caller)
    response.headers["Location"] = f"/employees/{emp.employee_id}"
    return EmployeeOut.from_employee(emp)


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: UUID,
    payload: EmployeeUpdate,
    caller: Caller = Depends(get_current_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    return EmployeeOut.from_employee(service.update_employee(employee_id, payload, caller))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: UUID,
    caller: Caller = Depends(get_current_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    service.delete_employee(employee_id, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
