import pytest

from helpdesk.dates import Date
from helpdesk.people import Technician, User
from helpdesk.registry import REFERENCE_DATE, TechnicianRegistry, UserRegistry


def make_user(name, cpf, tickets=0, birth=Date(1, 1, 2000)):
    user = User(name, cpf, birth, "tel", "F", "RH")
    user.tickets = tickets
    return user


def make_tech(name, cpf, worked=0, birth=Date(1, 1, 1990), area="TI"):
    tech = Technician(name, cpf, birth, "tel", "M", area, 1000, 40)
    tech.assign_hours(worked)
    return tech


def test_user_add_ignores_duplicate_cpf():
    users = UserRegistry()
    first = make_user("Ana", "cpf-a")
    assert users.add(first) is True
    assert users.add(make_user("Outra", "cpf-a")) is False
    assert len(users) == 1
    assert users[0] is first


def test_user_index_of():
    users = UserRegistry()
    users.add(make_user("Ana", "cpf-a"))
    users.add(make_user("Bia", "cpf-b"))
    assert users.index_of("cpf-a") == 0
    assert users.index_of("cpf-b") == 1
    assert users.index_of("cpf-z") is None


def test_user_iteration_keeps_registration_order():
    users = UserRegistry()
    names = ["Caio", "Ana", "Bia"]
    for number, name in enumerate(names):
        users.add(make_user(name, f"cpf-{number}"))
    assert [user.name for user in users] == names


def test_user_ranking_orders_by_tickets_then_name():
    users = UserRegistry()
    users.add(make_user("Caio", "c1", tickets=1))
    users.add(make_user("Bia", "c2", tickets=3))
    users.add(make_user("Ana", "c3", tickets=1))
    users.add(make_user("Davi", "c4", tickets=3))
    assert [u.name for u in users.ranking()] == ["Bia", "Davi", "Ana", "Caio"]
    assert [u.name for u in users] == ["Caio", "Bia", "Ana", "Davi"]


def test_user_describe_format():
    users = UserRegistry()
    user = make_user("Ana", "cpf-a")
    users.add(user)
    text = users.describe()
    assert text == (
        "----- BANCO DE USUARIOS -----\n"
        "--------------------\n"
        + user.describe()
        + "----------------------------\n\n"
    )


def test_user_describe_ranking_format():
    users = UserRegistry()
    low = make_user("Ana", "c1", tickets=0)
    high = make_user("Bia", "c2", tickets=2)
    users.add(low)
    users.add(high)
    assert users.describe_ranking() == (
        "----- RANKING DE USUARIOS -----\n"
        "--------------------\n"
        + high.describe()
        + "--------------------\n"
        + low.describe()
        + "-------------------------------\n\n"
    )


def test_user_average_age_of_single_user_is_its_age():
    users = UserRegistry()
    birth = Date(10, 5, 1990)
    users.add(make_user("Ana", "c1", birth=birth))
    assert users.average_age() == birth.years_until(REFERENCE_DATE)


def test_user_average_age_truncates():
    users = UserRegistry()
    today = Date(1, 1, 2020)
    users.add(make_user("Ana", "c1", birth=Date(1, 1, 2000)))
    users.add(make_user("Bia", "c2", birth=Date(1, 1, 1999)))
    assert users.average_age(today) == 20


def test_user_average_age_without_users_raises():
    with pytest.raises(ValueError):
        UserRegistry().average_age()


def test_technician_add_ignores_duplicate_cpf():
    techs = TechnicianRegistry()
    assert techs.add(make_tech("Bruno", "t1")) is True
    assert techs.add(make_tech("Bruno 2", "t1")) is False
    assert len(techs) == 1


def test_technician_add_hours():
    techs = TechnicianRegistry()
    tech = make_tech("Bruno", "t1")
    before = tech.available
    techs.add(tech)
    techs.add_hours("t1", 6)
    techs.add_hours("missing", 6)
    assert tech.worked == 6
    assert tech.available == before - 6


def test_technician_ranking_orders_by_worked_then_name():
    techs = TechnicianRegistry()
    techs.add(make_tech("Zeca", "t1", worked=2))
    techs.add(make_tech("Bruno", "t2", worked=5))
    techs.add(make_tech("Alice", "t3", worked=2))
    assert [t.name for t in techs.ranking()] == ["Bruno", "Alice", "Zeca"]


def test_technician_describe_format():
    techs = TechnicianRegistry()
    tech = make_tech("Bruno", "t1")
    techs.add(tech)
    assert techs.describe() == (
        "----- BANCO DE TECNICOS -----\n"
        "--------------------\n"
        + tech.describe()
        + "----------------------------\n\n"
    )


def test_technician_describe_ranking_empty():
    assert TechnicianRegistry().describe_ranking() == (
        "----- RANKING DE TECNICOS -----\n" "-------------------------------\n\n"
    )


def test_technician_average_worked_single():
    techs = TechnicianRegistry()
    techs.add(make_tech("Bruno", "t1", worked=5))
    assert techs.average_worked() == 5


def test_technician_average_age_single():
    techs = TechnicianRegistry()
    birth = Date(3, 3, 1985)
    techs.add(make_tech("Bruno", "t1", birth=birth))
    assert techs.average_age() == birth.years_until(REFERENCE_DATE)


def test_technician_averages_without_technicians_raise():
    with pytest.raises(ValueError):
        TechnicianRegistry().average_worked()
    with pytest.raises(ValueError):
        TechnicianRegistry().average_age()