from decimal import Decimal


def _course_payload(seed, **overrides):
    payload = {
        "title": "Data Structures",
        "description": "Lists, trees and graphs",
        "instructorId": seed.instructor_id,
        "categoryId": seed.category_id,
        "price": "999.00",
    }
    payload.update(overrides)
    return payload


def test_courses_require_login(client):
    assert client.get("/api/courses").status_code == 401


def test_create_course_defaults_to_draft(client, instructor_headers, seed):
    r = client.post("/api/courses", headers=instructor_headers, json=_course_payload(seed))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["status"] == "DRAFT"
    assert body["instructorId"] == seed.instructor_id
    assert body["instructor"]["email"] == "instructor1@example.com"
    assert Decimal(str(body["price"])) == Decimal("999.00")
    assert body["createdAt"]


def test_create_course_without_instructor(client, admin_headers, seed):
    payload = _course_payload(seed)
    del payload["instructorId"]
    r = client.post("/api/courses", headers=admin_headers, json=payload)
    assert r.status_code == 400
    assert r.json() == {"message": "Instructor ID is required"}


def test_create_course_unknown_instructor(client, admin_headers, seed):
    r = client.post("/api/courses", headers=admin_headers, json=_course_payload(seed, instructorId=99999))
    assert r.status_code == 400
    assert r.json() == {"message": "Instructor not found"}


def test_create_course_without_category(client, admin_headers, seed):
    payload = _course_payload(seed)
    del payload["categoryId"]
    r = client.post("/api/courses", headers=admin_headers, json=payload)
    assert r.status_code == 400
    assert r.json() == {"message": "Category ID is required"}


def test_create_course_bad_status(client, admin_headers, seed):
    r = client.post("/api/courses", headers=admin_headers, json=_course_payload(seed, status="live"))
    assert r.status_code == 400
    assert "Invalid status value" in r.json()["message"]


def test_get_course_and_missing(client, student_headers, seed):
    r = client.get(f"/api/courses/{seed.course_id}", headers=student_headers)
    assert r.status_code == 200
    assert r.json()["title"] == "Python Basics"

    r = client.get("/api/courses/99999", headers=student_headers)
    assert r.status_code == 404
    assert r.json() == {"message": "Course not found"}


def test_courses_by_status_is_case_insensitive(client, student_headers, seed):
    for value in ("PUBLISHED", "published", "Published"):
        r = client.get(f"/api/courses/status/{value}", headers=student_headers)
        assert r.status_code == 200
        assert [c["id"] for c in r.json()] == [seed.course_id]

    r = client.get("/api/courses/status/draft", headers=student_headers)
    assert r.json() == []


def test_courses_by_unknown_status(client, student_headers):
    r = client.get("/api/courses/status/LIVE", headers=student_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid status value. Valid values are: DRAFT, PUBLISHED, ARCHIVED"


def test_courses_by_category(client, student_headers, seed):
    r = client.get(f"/api/courses/category/{seed.category_id}", headers=student_headers)
    assert [c["id"] for c in r.json()] == [seed.course_id]

    r = client.get("/api/courses/category/99999", headers=student_headers)
    assert r.status_code == 200
    assert r.json() == []


def test_courses_by_instructor(client, student_headers, seed):
    r = client.get(f"/api/courses/instructor/{seed.instructor_id}", headers=student_headers)
    assert [c["id"] for c in r.json()] == [seed.course_id]

    r = client.get("/api/courses/instructor/99999", headers=student_headers)
    assert r.status_code == 404
    assert r.json() == {"message": "Instructor not found"}


def test_update_course_keeps_created_at_and_thumbnail(client, admin_headers, seed):
    client.put(
        f"/api/courses/{seed.course_id}",
        headers=admin_headers,
        json=_course_payload(seed, title="Python Basics", thumbnail="https://img.example.com/py.png"),
    )
    before = client.get(f"/api/courses/{seed.course_id}", headers=admin_headers).json()

    r = client.put(
        f"/api/courses/{seed.course_id}",
        headers=admin_headers,
        json=_course_payload(seed, title="Python Fundamentals", createdAt="2001-01-01T00:00:00"),
    )
    assert r.status_code == 200, r.text
    after = r.json()
    assert after["title"] == "Python Fundamentals"
    assert after["createdAt"] == before["createdAt"]
    assert after["thumbnail"] == "https://img.example.com/py.png"
    assert after["status"] == "PUBLISHED"


def test_update_missing_course(client, admin_headers, seed):
    r = client.put("/api/courses/99999", headers=admin_headers, json=_course_payload(seed))
    assert r.status_code == 404


def test_update_course_status(client, admin_headers, seed):
    r = client.put(f"/api/courses/{seed.course_id}/status", headers=admin_headers, json={"status": "archived"})
    assert r.status_code == 200
    assert r.json()["status"] == "ARCHIVED"

    r = client.put(f"/api/courses/{seed.course_id}/status", headers=admin_headers, json={})
    assert r.status_code == 400
    assert r.json() == {"message": "Status is required"}


def test_delete_course_without_dependents(client, admin_headers, seed):
    created = client.post("/api/courses", headers=admin_headers, json=_course_payload(seed)).json()

    r = client.delete(f"/api/courses/{created['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Course deleted successfully"}
    assert client.get(f"/api/courses/{created['id']}", headers=admin_headers).status_code == 404


def test_delete_course_with_videos_is_refused(client, admin_headers, seed):
    r = client.delete(f"/api/courses/{seed.course_id}", headers=admin_headers)
    assert r.status_code == 409
    assert r.json() == {"message": "Course still has videos or enrollments"}

    assert client.get(f"/api/courses/{seed.course_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/videos/{seed.video_id}", headers=admin_headers).status_code == 200


def test_delete_missing_course_is_best_effort(client, admin_headers):
    assert client.delete("/api/courses/99999", headers=admin_headers).status_code == 200
