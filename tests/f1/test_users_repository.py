"""Tests for Users repository."""

import pytest

from registrar.db.errors import CheckViolationError, UniqueViolationError
from registrar.db.models import UserRole
from registrar.db.users_repository import (
    delete_user,
    get_all_users,
    get_user_by_username,
    insert_user,
    update_user_role,
)


class TestUsers:
    """Tests for user CRUD."""

    def test_insert_and_get(self, init_test_db):
        user_id = insert_user("admin", "hashedpassword123", UserRole.ADMIN)

        user = get_user_by_username("admin")
        assert user.id == user_id
        assert user.password_hash == "hashedpassword123"
        assert user.role is UserRole.ADMIN

    def test_password_hash_stored_verbatim(self, init_test_db):
        """No format is enforced on password_hash."""
        insert_user("teacher1", "x", "Teacher")

        assert get_user_by_username("teacher1").password_hash == "x"

    def test_duplicate_username_rejected(self, init_test_db):
        insert_user("student1", "a", UserRole.STUDENT)

        with pytest.raises(UniqueViolationError):
            insert_user("student1", "b", UserRole.TEACHER)

        assert len(get_all_users()) == 1

    @pytest.mark.parametrize("role", ["Janitor", "admin", ""])
    def test_unknown_role_rejected(self, init_test_db, role):
        with pytest.raises(CheckViolationError):
            insert_user("someone", "hash", role)

    def test_get_not_found(self, init_test_db):
        assert get_user_by_username("nobody") is None

    def test_update_role(self, init_test_db):
        user_id = insert_user("teacher1", "hash", UserRole.TEACHER)

        update_user_role(user_id, UserRole.ADMIN)

        assert get_user_by_username("teacher1").role is UserRole.ADMIN

    def test_update_role_invalid(self, init_test_db):
        user_id = insert_user("teacher1", "hash", UserRole.TEACHER)

        with pytest.raises(CheckViolationError):
            update_user_role(user_id, "Dean")

        assert get_user_by_username("teacher1").role is UserRole.TEACHER

    def test_update_role_not_found(self, init_test_db):
        with pytest.raises(ValueError, match="User not found"):
            update_user_role(999, UserRole.ADMIN)

    def test_delete(self, init_test_db):
        user_id = insert_user("admin", "hash", UserRole.ADMIN)

        assert delete_user(user_id) is True
        assert delete_user(user_id) is False
        assert get_all_users() == []
