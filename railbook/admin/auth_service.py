import logging

from railbook.admin.schemas import AdminCap
from railbook.exceptions import UnAuthorizedError
from railbook.storage.record_store import RecordStore

logger = logging.getLogger(__name__)

class AdminAuthService:
    """Guards privileged booking operations"""
    
    def __init__(self, store: RecordStore):
        self.store = store
    
    def is_admin(self, admin_id: int) -> bool:
        return self.store.admins.contains(admin_id)
    
    def require_admin(self, admin_id: int) -> None:
        """Raise UnAuthorizedError unless admin_id is a registered admin"""
        if not self.is_admin(admin_id):
            logger.warning("Rejected privileged operation for unknown admin %s", admin_id)
            raise UnAuthorizedError("Unauthorized access")
    
    def register_admin(self, admin_id: int) -> AdminCap:
        """Register an admin; an existing AdminCap with the same id is overwritten"""
        admin_cap = AdminCap(admin_id=admin_id)
        self.store.admins.insert(admin_id, admin_cap)
        return admin_cap
