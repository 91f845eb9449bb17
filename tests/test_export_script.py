from datetime import date

from scripts.export_timecards import load_repositories


def test_snapshot_loader_skips_unreadable_attendance(capsys):
    snapshot = {
        "employees": [{"id": "e1", "displayName": "Ana", "hireDate": "2020-03-02"}],
        "compensation": [{"employeeId": "e1", "hourlyRate": 20}],
        "attendance": [
            {"employeeId": "e1", "date": "2026-03-02", "clockIn": "2026-03-02T09:00:00", "totalHours": 8},
            {"employeeId": "e1", "date": "garbage"},
        ],
    }

    employees_repo, attendance_repo = load_repositories(snapshot)

    assert employees_repo.get_compensation("e1").hourly_rate == 20.0
    assert [r.work_date for r in attendance_repo.list_for_employee("e1")] == [date(2026, 3, 2)]
    assert "SKIP: Invalid attendance date" in capsys.readouterr().err
