from datetime import datetime, timezone
from catalog.extensions import db


class AuditLog(db.Model):
    __tablename__ = "audit_log"

    id = db.Column(db.Integer, primary_key=True)
    admin_id = db.Column(db.BigInteger, nullable=True, index=True)
    action = db.Column(db.String(50), nullable=False)
    entity_type = db.Column(db.String(50), nullable=False)
    entity_id = db.Column(db.Integer, nullable=True, index=True)
    payload = db.Column(db.JSON)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    ACTIONS = {
        "CREATE_OPTION",
        "UPDATE_OPTION",
        "DELETE_OPTION",
        "ADD_VALUE",
        "REMOVE_VALUE",
        "ASSIGN_OPTION",
        "UNASSIGN_OPTION",
        "GENERATE_SKUS",
    }

    def __repr__(self):
        return f"<AuditLog {self.action} {self.entity_type}:{self.entity_id} by {self.admin_id}>"
