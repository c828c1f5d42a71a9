"""
Service catalog - the repair services the company offers
"""
from typing import List

from sqlalchemy.orm import Session

from fieldops.models.service import ServiceOffering
from fieldops.schemas.service import ServiceCreate
from fieldops.services.audit_service import log_audit


def list_services(db: Session) -> List[ServiceOffering]:
    return db.query(ServiceOffering).order_by(ServiceOffering.name).all()


def create_service(db: Session, data: ServiceCreate, actor_id: int) -> ServiceOffering:
    service = ServiceOffering(
        name=data.name,
        description=data.description,
        service_type=data.service_type.value,
        image_url=data.image_url,
        technicians_count=data.technicians_count,
        popularity=data.popularity.value,
    )
    db.add(service)
    db.commit()
    db.refresh(service)

    log_audit(
        db=db,
        actor_id=actor_id,
        action="SERVICE_CREATE",
        entity_type="services",
        entity_id=service.id,
        meta={"name": service.name, "service_type": service.service_type},
    )
    return service
