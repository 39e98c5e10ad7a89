import threading

from src.attendance_payroll.attendance_payroll.common.locks import EmployeeLocks


def test_same_code_waits_other_code_does_not():
    locks = EmployeeLocks()
    held = threading.Event()
    release = threading.Event()
    acquired = threading.Event()

    def holder():
        with locks.hold("1001"):
            held.set()
            release.wait(5)

    def contender():
        with locks.hold("1001"):
            acquired.set()

    first = threading.Thread(target=holder)
    first.start()
    assert held.wait(5)

    second = threading.Thread(target=contender)
    second.start()
    assert not acquired.wait(0.2)

    with locks.hold("2002"):
        assert not acquired.is_set()

    release.set()
    first.join(5)
    second.join(5)
    assert acquired.is_set()
