from deckcore.ui_logic.card_view import CardView, build_card_view
from deckcore.ui_logic.record_sequence import RecordSequence

HEADER = [
    "title", "company_name", "location", "type", "experience", "salary",
    "description", "skills", "company_website", "currentDate",
]


def test_build_card_view_decodes_fields():
    sequence = RecordSequence()
    sequence.load(HEADER, [
        ["Backend Engineer", "Acme", "Berlin", "Full-time", "3", "", "Build APIs",
         '["python", "sql"]', "https://acme.example", "2024-01-05"],
        ["Older job", "Beta"],
    ])

    view = build_card_view(sequence)

    assert view.label == "Job 1 of 2"
    assert view.title == "Backend Engineer"
    assert view.company_name == "Acme"
    assert view.job_type == "Full-time"
    assert view.experience == "3"
    assert view.salary == ""
    assert view.skills == ["python", "sql"]
    assert view.company_website == "https://acme.example"
    assert view.posted == "Jan 5, 2024"
    assert not view.can_go_previous
    assert view.can_go_next
    assert not view.is_empty


def test_build_card_view_follows_cursor():
    sequence = RecordSequence()
    sequence.load(HEADER, [["First"], ["Second", "", "", "", "", "", "", "not json", "", "someday"]])
    sequence.go_next()

    view = build_card_view(sequence)

    assert view.label == "Job 2 of 2"
    assert view.title == "Second"
    assert view.skills == []
    assert view.posted == "someday"
    assert view.can_go_previous
    assert not view.can_go_next


def test_empty_sequence_gives_empty_view():
    sequence = RecordSequence()
    sequence.load(HEADER, [])
    view = build_card_view(sequence)
    assert view == CardView()
    assert view.is_empty
