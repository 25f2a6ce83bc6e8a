# warm_admin/services/provisioner.py
"""
Admin provisioning - makes sure the admins table exists and holds an
account for the configured email, with a bcrypt-hashed password.

Safe to run repeatedly: an existing account is only touched when
force_update is set.
"""
import logging

from sqlalchemy import func, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from warm_admin.core.exceptions import PersistenceError
from warm_admin.core.security import hash_password
from warm_admin.db.session import engine_scope, ensure_admin_table, open_connection
from warm_admin.models.admin import Admin, AdminRole
from warm_admin.schemas.admin import ProvisionAction, ProvisionConfig, ProvisionResult

log = logging.getLogger("warm_admin.provisioner")

admins = Admin.__table__


class AdminProvisioner:
    """Runs the provisioning steps against one database connection."""

    def __init__(self, config: ProvisionConfig):
        self.config = config

    def provision(self) -> ProvisionResult:
        """
        Ensure the admin account exists.

        Raises:
            ConnectivityError: the database cannot be reached
            PersistenceError: table creation or the row insert/update failed
        """
        cfg = self.config
        with engine_scope(cfg.database) as engine:
            with open_connection(engine) as conn:
                log.info(f"✅ Connected to database: {engine.url.database}")
                table_created = ensure_admin_table(conn)
                result = self._provision_account(conn)

        result.table_created = table_created
        return result

    # ────────────────────────────────────────────
    # Steps
    # ────────────────────────────────────────────

    def _count_existing(self, conn: Connection) -> int:
        stmt = select(func.count()).select_from(admins).where(admins.c.email == self.config.target_email)
        return conn.execute(stmt).scalar_one()

    def _provision_account(self, conn: Connection) -> ProvisionResult:
        cfg = self.config
        try:
            existing = self._count_existing(conn)

            if existing == 0:
                self._create_account(conn)
                action = ProvisionAction.CREATED
            elif cfg.force_update:
                self._update_password(conn)
                action = ProvisionAction.UPDATED
            else:
                conn.rollback()
                log.warning(f"⚠️  Admin {cfg.target_email} already exists")
                log.warning("Run with --force to update the password")
                return ProvisionResult(
                    action=ProvisionAction.EXISTS,
                    email=cfg.target_email,
                    username=cfg.target_username,
                )

            conn.commit()
        except SQLAlchemyError as e:
            conn.rollback()
            raise PersistenceError(f"Failed to provision admin {cfg.target_email}: {e}") from e

        return ProvisionResult(
            action=action,
            email=cfg.target_email,
            username=cfg.target_username,
            password=cfg.initial_password,
        )

    def _create_account(self, conn: Connection):
        cfg = self.config
        log.info("Creating admin with password hash...")
        conn.execute(
            insert(admins).values(
                username=cfg.target_username,
                email=cfg.target_email,
                password=hash_password(cfg.initial_password),
                first_name=cfg.first_name,
                last_name=cfg.last_name,
                role=AdminRole.SUPER_ADMIN,
                is_active=True,
            )
        )
        log.info(f"✅ Admin {cfg.target_email} created")

    def _update_password(self, conn: Connection):
        cfg = self.config
        conn.execute(
            update(admins)
            .where(admins.c.email == cfg.target_email)
            .values(password=hash_password(cfg.initial_password))
        )
        log.info(f"✅ Password updated for {cfg.target_email}")


def provision(config: ProvisionConfig) -> ProvisionResult:
    """Shortcut for AdminProvisioner(config).provision()."""
    return AdminProvisioner(config).provision()
