import pytest

from wintergen.component import Component


class UserService(Component):
    pass


class MailService(Component):
    pass


@pytest.fixture(autouse=True)
def empty_registry():
    Component.clear()
    yield
    Component.clear()


def test_ids_are_sequential_and_stored_on_class():
    user = UserService()
    mail = MailService()
    assert Component.add_component(user) == 0
    assert Component.add_component(mail) == 1
    assert UserService.component_id == 0
    assert MailService.component_id == 1


def test_lookup_by_class_id():
    user = UserService()
    mail = MailService()
    Component.add_component(user)
    Component.add_component(mail)
    assert Component.get_by_id(MailService.component_id) is mail
    assert UserService.get_by_id(UserService.component_id) is user


def test_unknown_id_raises():
    Component.add_component(UserService())
    with pytest.raises(IndexError):
        Component.get_by_id(1)
    with pytest.raises(IndexError):
        Component.get_by_id(-1)


def test_clear_empties_registry():
    Component.add_component(UserService())
    Component.clear()
    with pytest.raises(IndexError):
        Component.get_by_id(0)


def test_non_component_rejected():
    with pytest.raises(TypeError):
        Component.add_component(object())