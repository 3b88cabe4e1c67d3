from blahchat.users import Admin, RegularUser, User

PASSWORD = "password"


def test_regular_user_type():
    assert RegularUser("alice", PASSWORD).user_type() == "RegularUser"


def test_admin_type_and_fields():
    admin = Admin(3, "root", PASSWORD)
    assert admin.user_type() == "Admin"
    assert admin.admin_id == 3
    assert admin.username == "root"
    assert admin.password == PASSWORD


def test_base_user_type():
    assert User("bob", PASSWORD).user_type() == "User"


def test_defaults_are_empty():
    user = RegularUser()
    assert user.username == ""
    assert user.password == ""
    assert user.chats == []


def test_admin_defaults():
    admin = Admin(9)
    assert (admin.admin_id, admin.username, admin.password) == (9, "", "")


def test_chat_lists_are_independent():
    first = RegularUser("a", PASSWORD)
    second = RegularUser("b", PASSWORD)
    first.chats.append(object())
    assert second.chats == []


def test_admins_compare_by_id():
    assert Admin(1, "root", PASSWORD) == Admin(1, "root", PASSWORD)
    assert not Admin(1, "root", PASSWORD) == Admin(2, "root", PASSWORD)


def test_admin_is_a_user():
    assert isinstance(Admin(1, "root", PASSWORD), User)
    assert Admin(1).user_type() != RegularUser().user_type()