"""Application tests for admin account maintenance."""

import pytest
from backoffice.admin.admin import admins, find_admin_by_email
from backoffice.admin.management import AddAdmin, RemoveAdmin, UpdateAdmin
from backoffice.shared.errors import NotFound
from backoffice.user.user import users
from protean import current_domain
from protean.exceptions import ValidationError


class TestAddAdminFlow:
    def test_add_admin(self):
        admin_id = current_domain.process(
            AddAdmin(name="Ada Admin", email="a@x.com", password="p"),
            asynchronous=False,
        )
        admin = admins.get_by_id(admin_id)
        assert admin.email == "a@x.com"
        assert admin.role == "Admin"
        assert admin.check_password("p")

    def test_duplicate_email_is_rejected(self, add_admin):
        add_admin(email="ada@example.com")
        with pytest.raises(ValidationError):
            add_admin(name="Another", email="ada@example.com")


class TestUpdateAdminFlow:
    def test_update_admin(self, add_admin):
        admin_id = add_admin()
        current_domain.process(
            UpdateAdmin(admin_id=admin_id, name="Ada Lovelace", password="rotated"),
            asynchronous=False,
        )
        admin = admins.get_by_id(admin_id)
        assert admin.name == "Ada Lovelace"
        assert admin.check_password("rotated")

    def test_update_unknown_admin_raises_not_found(self):
        with pytest.raises(NotFound) as exc:
            current_domain.process(UpdateAdmin(admin_id="missing-admin", name="Nobody"), asynchronous=False)
        assert exc.value.kind == "Admin"


class TestRemoveAdminFlow:
    def test_remove_admin(self, add_admin):
        admin_id = add_admin()
        assert current_domain.process(RemoveAdmin(admin_id=admin_id), asynchronous=False) is True
        assert find_admin_by_email("ada@example.com") is None

    def test_remove_unknown_admin_leaves_everything_else_alone(self, add_admin, register_user):
        add_admin(name="Ada", email="ada@example.com")
        add_admin(name="Grace", email="grace@example.com")
        register_user(email="jane@example.com")

        admins_before = [admin.id for admin in admins.list()]
        users_before = [user.id for user in users.list()]

        removed = current_domain.process(RemoveAdmin(admin_id="no-such-admin"), asynchronous=False)

        assert removed is False
        assert [admin.id for admin in admins.list()] == admins_before
        assert [user.id for user in users.list()] == users_before
