def test_text_note_example_scenario(client):
    response = client.post(
        "/api/notes",
        data={
            "patientId": "john-smith",
            "inputType": "text",
            "textContent": "Patient reports mild headache.",
        },
    )
    assert response.status_code == 200
    note = response.json()
    assert note["rawContent"] == "Patient reports mild headache."
    assert note["transcription"] is None
    assert note["summary"] is None
    assert note["inputType"] == "text"
    assert note["patientId"] == "john-smith"
    assert note["patient"]["name"] == "John Smith"
    assert note["hasAudio"] is False

    listed = client.get("/api/notes").json()
    assert listed[0]["id"] == note["id"]


def test_audio_note_with_recording(client):
    response = client.post(
        "/api/notes",
        data={
            "patientId": "maria-garcia",
            "inputType": "audio",
            "transcription": " patient sleeping better ",
        },
        files={"audioFile": ("recording.webm", b"\x1aE\xdf\xa3\x00\x01binary", "audio/webm")},
    )
    assert response.status_code == 200
    note = response.json()
    assert note["rawContent"] == "patient sleeping better"
    assert note["transcription"] == "patient sleeping better"
    assert note["hasAudio"] is True

    audio = client.get(f"/api/notes/{note['id']}/audio")
    assert audio.status_code == 200
    assert audio.headers["content-type"] == "audio/webm"
    assert audio.content == b"\x1aE\xdf\xa3\x00\x01binary"


def test_audio_endpoint_for_text_note_is_404(client):
    note = client.post(
        "/api/notes",
        data={"patientId": "john-smith", "inputType": "text", "textContent": "typed"},
    ).json()
    response = client.get(f"/api/notes/{note['id']}/audio")
    assert response.status_code == 404
    assert response.json() == {"error": "Note has no audio"}


def test_missing_patient_id_is_rejected(client):
    response = client.post(
        "/api/notes",
        data={"inputType": "text", "textContent": "Patient reports mild headache."},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Patient ID is required"}
    assert client.get("/api/notes").json() == []


def test_empty_text_content_is_rejected(client):
    response = client.post(
        "/api/notes",
        data={"patientId": "john-smith", "inputType": "text", "textContent": ""},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}
    assert client.get("/api/notes").json() == []


def test_audio_without_transcription_is_rejected(client):
    response = client.post(
        "/api/notes",
        data={"patientId": "john-smith", "inputType": "audio"},
        files={"audioFile": ("recording.webm", b"abc", "audio/webm")},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}


def test_unknown_patient_is_404(client):
    response = client.post(
        "/api/notes",
        data={"patientId": "jane-doe", "inputType": "text", "textContent": "content"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Patient not found"}
    assert client.get("/api/notes").json() == []


def test_list_notes_newest_first(client):
    created = []
    for text in ["first", "second", "third"]:
        response = client.post(
            "/api/notes",
            data={"patientId": "robert-johnson", "inputType": "text", "textContent": text},
        )
        created.append(response.json()["id"])

    listed = client.get("/api/notes").json()
    assert [n["id"] for n in listed] == list(reversed(created))
    assert all(n["patient"]["id"] == "robert-johnson" for n in listed)


def test_get_note_by_id(client):
    created = client.post(
        "/api/notes",
        data={"patientId": "john-smith", "inputType": "text", "textContent": "BP 120/80"},
    ).json()

    response = client.get(f"/api/notes/{created['id']}")
    assert response.status_code == 200
    assert response.json()["rawContent"] == "BP 120/80"
    assert response.json()["patient"]["dob"] == "1985-03-15"


def test_get_unknown_note_is_404(client):
    response = client.get("/api/notes/never-created")
    assert response.status_code == 404
    assert response.json() == {"error": "Note not found"}


def test_timestamps_carry_utc_offset(client):
    created = client.post(
        "/api/notes",
        data={"patientId": "john-smith", "inputType": "text", "textContent": "BP 120/80"},
    ).json()
    assert created["createdAt"].endswith(("Z", "+00:00"))
    assert created["updatedAt"].endswith(("Z", "+00:00"))
    assert created["patient"]["createdAt"].endswith(("Z", "+00:00"))

    listed = client.get("/api/notes").json()[0]
    assert listed["createdAt"] == created["createdAt"]

    fetched = client.get(f"/api/notes/{created['id']}").json()
    assert fetched["createdAt"].endswith(("Z", "+00:00"))
