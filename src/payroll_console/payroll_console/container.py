from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .client.http_client import ApiConfig, BackendClient
from .employees.api_employee_repository import ApiEmployeeRepository
from .employees.service import EmployeeService
from .onboarding.service import OnboardingService
from .payslips.service import PayslipService
from .profile.service import ProfileService
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    client: BackendClient

    employees_repo: ApiEmployeeRepository

    auth_service: AuthService
    onboarding_service: OnboardingService
    employee_service: EmployeeService
    payslip_service: PayslipService
    attendance_service: AttendanceService
    profile_service: ProfileService


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", 10)),
    )
    client = BackendClient(config)

    employees_repo = ApiEmployeeRepository(client)

    return Container(
        client=client,
        employees_repo=employees_repo,
        auth_service=AuthService(client),
        onboarding_service=OnboardingService(client),
        employee_service=EmployeeService(employees_repo),
        payslip_service=PayslipService(client),
        attendance_service=AttendanceService(client),
        profile_service=ProfileService(client),
    )
