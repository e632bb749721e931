from core import db
from core.errors import StorageError
from pets.records import Species
from vets.records import Specialty


def test_make_visit(client, add_pet, add_vet):
    pet = add_pet("Sofi", 2, Species.CAT)
    vet = add_vet("Dr. Smith", Specialty.GENERAL)

    response = client.put(
        f"/visits/pets/{pet['id']}/vets/{vet['id']}",
        json={"date": "2024-03-01", "description": "Vaccination"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2024-03-01"
    assert body["description"] == "Vaccination"
    assert body["pet"] == {"id": pet["id"], "name": "Sofi", "age": 2, "species": "CAT"}
    assert body["vet"] == {"id": vet["id"], "name": "Dr. Smith", "specialty": "GENERAL"}


def test_make_visit_for_missing_pet(client, add_vet, visit_repository):
    vet = add_vet("Dr. Smith", Specialty.GENERAL)

    response = client.put(f"/visits/pets/5/vets/{vet['id']}", json={"date": "2024-03-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Pet does not exist."
    assert visit_repository.rows == {}


def test_make_visit_for_missing_vet(client, add_pet, visit_repository):
    pet = add_pet("Sofi", 2, Species.CAT)

    response = client.put(f"/visits/pets/{pet['id']}/vets/5", json={"date": "2024-03-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Vet does not exist."
    assert visit_repository.rows == {}


def test_make_visit_invalid_date(client, add_pet, add_vet):
    pet = add_pet("Sofi", 2, Species.CAT)
    vet = add_vet("Dr. Smith", Specialty.GENERAL)

    response = client.put(f"/visits/pets/{pet['id']}/vets/{vet['id']}", json={"date": "yesterday"})

    assert response.status_code == 422


def test_make_visit_storage_failure(client, add_pet, add_vet, visit_repository):
    pet = add_pet("Sofi", 2, Species.CAT)
    vet = add_vet("Dr. Smith", Specialty.GENERAL)
    visit_repository.fail_writes = True

    response = client.put(f"/visits/pets/{pet['id']}/vets/{vet['id']}", json={"date": "2024-03-01"})

    assert response.status_code == 500


def test_get_pet_visits(client, add_pet, add_vet):
    pet = add_pet("Sofi", 2, Species.CAT)
    other = add_pet("Lucky", 5, Species.DOG)
    vet = add_vet("Dr. Smith", Specialty.GENERAL)
    client.put(f"/visits/pets/{pet['id']}/vets/{vet['id']}", json={"date": "2024-03-01", "description": "a"})
    client.put(f"/visits/pets/{other['id']}/vets/{vet['id']}", json={"date": "2024-03-02", "description": "b"})
    client.put(f"/visits/pets/{pet['id']}/vets/{vet['id']}", json={"date": "2024-03-03", "description": "c"})

    response = client.get(f"/visits/pets/{pet['id']}")

    assert response.status_code == 200
    assert [v["description"] for v in response.json()] == ["a", "c"]


def test_get_visits_for_missing_pet(client):
    response = client.get("/visits/pets/12")

    assert response.status_code == 400
    assert response.json()["detail"] == "Pet does not exist."


def test_health_without_pool(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_make_visit_for_non_positive_pet_id(client, add_vet, visit_repository):
    vet = add_vet("Dr. Smith", Specialty.GENERAL)

    response = client.put(f"/visits/pets/0/vets/{vet['id']}", json={"date": "2024-03-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Pet does not exist."
    assert visit_repository.rows == {}


def test_make_visit_for_negative_vet_id(client, add_pet, visit_repository):
    pet = add_pet("Sofi", 2, Species.CAT)

    response = client.put(f"/visits/pets/{pet['id']}/vets/-3", json={"date": "2024-03-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Vet does not exist."
    assert visit_repository.rows == {}


def test_health_reports_database_failure(client, monkeypatch):
    async def failing_ping() -> bool:
        raise StorageError("connection refused")

    monkeypatch.setattr(db, "is_initialized", lambda: True)
    monkeypatch.setattr(db, "ping", failing_ping)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"
