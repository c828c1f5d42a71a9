"""
Database initialization helpers

ensure_initial_admin runs on app startup; seed_service_catalog is only run
manually (scripts/seed_catalog.py).
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from fieldops.core.config import settings
from fieldops.core.security import hash_password
from fieldops.models.employee import Employee, Role, ServiceType
from fieldops.models.service import Popularity, ServiceOffering

logger = logging.getLogger(__name__)

# Static catalog shown on the dashboard; technician counts are maintained by admins
DEFAULT_SERVICES = [
    {
        "name": "AC Repair & Service",
        "description": "Installation, gas refill and repair of split and window air conditioners",
        "service_type": ServiceType.AC_REPAIR,
        "popularity": Popularity.MOST_REQUESTED,
    },
    {
        "name": "Refrigerator Repair",
        "description": "Cooling, compressor and thermostat repairs for all refrigerator types",
        "service_type": ServiceType.REFRIGERATOR,
        "popularity": Popularity.POPULAR,
    },
    {
        "name": "Washing Machine Repair",
        "description": "Drum, motor and drainage repairs for top and front load machines",
        "service_type": ServiceType.WASHING_MACHINE,
        "popularity": Popularity.POPULAR,
    },
    {
        "name": "Microwave Repair",
        "description": "Magnetron, turntable and control panel repairs",
        "service_type": ServiceType.MICROWAVE,
        "popularity": Popularity.REGULAR,
    },
    {
        "name": "Dishwasher Repair",
        "description": "Pump, spray arm and leak repairs",
        "service_type": ServiceType.DISHWASHER,
        "popularity": Popularity.REGULAR,
    },
]


def ensure_initial_admin(db: Session) -> Optional[Employee]:
    """
    Create the initial admin when no admin exists

    Returns:
        The created admin, or None when an admin already exists
    """
    existing = db.query(Employee).filter(Employee.role == Role.ADMIN.value).first()
    if existing:
        logger.info("Admin user already exists, skipping initial bootstrap")
        return None

    admin = Employee(
        username=settings.INITIAL_ADMIN_USERNAME,
        name="System Administrator",
        role=Role.ADMIN.value,
        active=True,
        password_hash=hash_password(settings.INITIAL_ADMIN_PASSWORD),
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)

    logger.info("Initial admin user created: username=%s", admin.username)
    logger.info("Password: [set via INITIAL_ADMIN_PASSWORD environment variable]")
    return admin


def seed_service_catalog(db: Session) -> int:
    """Insert the default catalog entries that are missing (matched by name). Returns the number added."""
    existing_names = {name for (name,) in db.query(ServiceOffering.name).all()}
    added = 0
    for entry in DEFAULT_SERVICES:
        if entry["name"] in existing_names:
            continue
        db.add(ServiceOffering(
            name=entry["name"],
            description=entry["description"],
            service_type=entry["service_type"].value,
            technicians_count=0,
            popularity=entry["popularity"].value,
        ))
        added += 1
    db.commit()
    return added
