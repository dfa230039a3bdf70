from decimal import Decimal


def _enroll(client, headers, user_id, course_id, status=None):
    payload = {"userId": user_id, "courseId": course_id}
    if status:
        payload["status"] = status
    r = client.post("/api/enrollments", headers=headers, json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_enrollment_report(client, admin_headers, seed):
    _enroll(client, admin_headers, seed.student_id, seed.course_id)
    _enroll(client, admin_headers, seed.admin_id, seed.course_id, status="COMPLETED")

    r = client.get("/api/reports/enrollments", headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["totalEnrollments"] == 2
    assert body["enrollmentByStatus"] == {"IN_PROGRESS": 1, "COMPLETED": 1, "DROPPED": 0}
    assert len(body["monthlyEnrollments"]) == 12
    assert sum(body["monthlyEnrollments"]) == 2
    assert {e["userName"] for e in body["recentEnrollments"]} == {"Student One", "Admin User"}
    assert all(e["courseName"] == "Python Basics" for e in body["recentEnrollments"])


def test_user_report(client, admin_headers, seed):
    client.put(f"/api/users/{seed.student_id}/status", headers=admin_headers, json={"status": "INACTIVE"})

    body = client.get("/api/reports/users", headers=admin_headers).json()
    assert body["totalUsers"] == 3
    assert body["activeUsers"] == 2
    assert body["usersByRole"] == {"STUDENT": 1, "INSTRUCTOR": 1, "ADMIN": 1}
    assert len(body["recentUsers"]) == 3


def test_course_report(client, admin_headers, seed):
    client.post(
        "/api/courses",
        headers=admin_headers,
        json={"title": "Draft Course", "instructorId": seed.instructor_id, "categoryId": 99999},
    )
    _enroll(client, admin_headers, seed.student_id, seed.course_id)

    body = client.get("/api/reports/courses", headers=admin_headers).json()
    assert body["totalCourses"] == 2
    assert body["activeCourses"] == 1
    assert body["coursesByCategory"] == {"Programming": 1, "Uncategorized": 1}
    assert body["popularCourses"] == [{"courseId": seed.course_id, "title": "Python Basics", "enrollments": 1}]


def test_reports_require_login(client):
    assert client.get("/api/reports/users").status_code == 401


def test_revenue_report(client, admin_headers, seed):
    loose = client.post(
        "/api/courses",
        headers=admin_headers,
        json={"title": "Loose Course", "instructorId": seed.instructor_id, "categoryId": 99999, "price": "100.00"},
    ).json()
    _enroll(client, admin_headers, seed.student_id, seed.course_id)
    _enroll(client, admin_headers, seed.admin_id, seed.course_id)
    _enroll(client, admin_headers, seed.student_id, loose["id"])

    r = client.get("/api/reports/revenue", headers=admin_headers)
    assert r.status_code == 200
    body = r.json()

    assert Decimal(str(body["totalRevenue"])) == Decimal("1098.00")
    assert len(body["monthlyRevenue"]) == 12
    assert sum(Decimal(str(m)) for m in body["monthlyRevenue"]) == Decimal("1098.00")
    by_category = {k: Decimal(str(v)) for k, v in body["revenueByCategory"].items()}
    assert by_category == {"Programming": Decimal("998.00"), "Uncategorized": Decimal("100.00")}


def test_revenue_report_without_enrollments(client, admin_headers):
    body = client.get("/api/reports/revenue", headers=admin_headers).json()
    assert Decimal(str(body["totalRevenue"])) == 0
    assert body["revenueByCategory"].keys() == {"Programming", "Uncategorized"}
