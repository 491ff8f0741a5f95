"""Request payload builders shared by the API tests."""


def branch_payload(name="North", email="a@b.com", password="secret1", **extra):
    payload = {
        "name": name,
        "address": f"1 {name} Road",
        "phone": "0400000000",
        "manager": f"{name} Manager",
        "capacity": 50,
        "admin": {"name": f"{name} Admin", "email": email, "password": password},
    }
    payload.update(extra)
    return payload


def student_payload(name="Asha", branch="North", **extra):
    payload = {
        "name": name,
        "email": f"{name.lower()}@v18tuition.com",
        "grade": "10",
        "subjects": ["Maths"],
        "branch": branch,
        "monthlyFee": 8000,
        "feesPaid": 3000,
    }
    payload.update(extra)
    return payload
