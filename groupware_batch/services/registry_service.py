"""
Reference registries - code -> descriptor lookups loaded once per batch run.

Built from the department, place category and vacation category masters and
handed to each engine explicitly; nothing here is module-global.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from sqlalchemy.orm import Session

from groupware_batch.core.exceptions import RegistryLookupError
from groupware_batch.models.department import Department
from groupware_batch.models.place_category import PlaceCategory
from groupware_batch.models.vacation_category import VacationCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepartmentType:
    code: str
    name: str
    admin: bool


@dataclass(frozen=True)
class PlaceType:
    code: str
    name: str
    is_default: bool


@dataclass(frozen=True)
class VacationType:
    code: str
    name: str
    is_paid: bool
    paid_days: Decimal


@dataclass(frozen=True)
class Registries:
    departments: Dict[str, DepartmentType] = field(default_factory=dict)
    places: Dict[str, PlaceType] = field(default_factory=dict)
    vacations: Dict[str, VacationType] = field(default_factory=dict)

    def department(self, code: str) -> DepartmentType:
        try:
            return self.departments[code]
        except KeyError:
            raise RegistryLookupError("department", code) from None

    def place_category(self, code: str) -> PlaceType:
        try:
            return self.places[code]
        except KeyError:
            raise RegistryLookupError("place category", code) from None

    def vacation_category(self, code: str) -> VacationType:
        try:
            return self.vacations[code]
        except KeyError:
            raise RegistryLookupError("vacation category", code) from None

    @property
    def default_place_code(self) -> Optional[str]:
        """Code of the default work place, or None when the master has none"""
        for place in self.places.values():
            if place.is_default:
                return place.code
        return None


def load_registries(
    db: Session,
    departments: bool = True,
    places: bool = True,
    vacations: bool = True,
) -> Registries:
    """
    Load the reference masters a batch needs

    Args:
        db: Database session
        departments: Load the department master
        places: Load the place category master
        vacations: Load the vacation category master

    Returns:
        Registries with the requested masters (others left empty)
    """
    dept_map: Dict[str, DepartmentType] = {}
    if departments:
        for row in db.query(Department).filter(Department.active == True).all():
            dept_map[row.code] = DepartmentType(code=row.code, name=row.name, admin=bool(row.admin))

    place_map: Dict[str, PlaceType] = {}
    if places:
        for row in db.query(PlaceCategory).order_by(PlaceCategory.code).all():
            place_map[row.code] = PlaceType(code=row.code, name=row.name, is_default=bool(row.is_default))

    vacation_map: Dict[str, VacationType] = {}
    if vacations:
        for row in db.query(VacationCategory).all():
            vacation_map[row.code] = VacationType(
                code=row.code,
                name=row.name,
                is_paid=bool(row.is_paid),
                paid_days=Decimal(str(row.paid_days or 0)),
            )

    logger.info(
        "Registries loaded: departments=%d, place_categories=%d, vacation_categories=%d",
        len(dept_map), len(place_map), len(vacation_map),
    )
    return Registries(departments=dept_map, places=place_map, vacations=vacation_map)
