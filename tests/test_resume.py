import pytest

from reumes.resume import (
    Basics,
    Location,
    Profile,
    Resume,
    Work,
    load_resume,
    parse_resume,
)

JSON_DOC = """
{
  "basics": {
    "name": "Ada Example",
    "email": "ada@example.com",
    "location": {"city": "Springfield", "postalCode": "12345"},
    "profiles": [{"network": "Mastodon", "username": "ada"}]
  },
  "work": [
    {"name": "Example Co", "startDate": "2013-01-31", "highlights": ["Shipped"]}
  ],
  "skills": [{"name": "Web", "level": "Master", "keywords": ["HTML", "CSS"]}]
}
"""

YAML_DOC = """
basics:
  name: Ada Example
  email: ada@example.com
  location:
    city: Springfield
    postalCode: "12345"
  profiles:
    - network: Mastodon
      username: ada
work:
  - name: Example Co
    startDate: 2013-01-31
    highlights:
      - Shipped
skills:
  - name: Web
    level: Master
    keywords: [HTML, CSS]
"""


def test_json_is_yaml():
    assert parse_resume(YAML_DOC) == parse_resume(JSON_DOC)


def test_fields_are_loaded():
    res = parse_resume(YAML_DOC)
    assert res.basics.name == "Ada Example"
    assert res.basics.location == Location(city="Springfield", postal_code="12345")
    assert res.basics.profiles == [Profile(network="Mastodon", username="ada")]
    assert res.work[0].start_date == "2013-01-31"
    assert res.skills[0].keywords == ["HTML", "CSS"]


def test_missing_sections_default_to_empty():
    res = parse_resume("basics:\n  name: Ada Example\n")
    assert res.work == []
    assert res.basics.label == ""
    assert res.basics.location == Location()


def test_empty_document_is_empty_resume():
    assert parse_resume("") == Resume()
    assert load_resume(None) == Resume()


def test_scalars_become_strings():
    res = parse_resume(
        "languages:\n  - language: English\n    fluency: 5\n"
        "education:\n  - institution: Uni\n    score: 3.5\n"
    )
    assert res.languages[0].fluency == "5"
    assert res.education[0].score == "3.5"


def test_unknown_keys_are_ignored():
    res = parse_resume("meta:\n  theme: x\nbasics:\n  name: Ada\n  extra: 1\n")
    assert res == Resume(basics=Basics(name="Ada"))


def test_load_resume_from_mapping():
    res = load_resume({"work": [{"name": "Example Co", "position": "Dev"}]})
    assert res.work == [Work(name="Example Co", position="Dev")]


def test_export_context_keys():
    ctx = parse_resume(YAML_DOC).export_context()
    assert set(ctx) == {
        "basics", "work", "volunteer", "education", "awards", "certificates",
        "publications", "skills", "languages", "interests", "references",
        "projects",
    }
    assert ctx["basics"]["location"]["postalCode"] == "12345"
    assert ctx["basics"]["profiles"] == [
        {"network": "Mastodon", "username": "ada", "url": ""}
    ]
    assert ctx["work"][0]["highlights"] == ["Shipped"]
    assert ctx["work"][0]["startDate"] == "2013-01-31"
    assert ctx["projects"] == []


def test_export_context_is_detached():
    res = parse_resume(YAML_DOC)
    ctx = res.export_context()
    ctx["work"][0]["highlights"].append("Extra")
    assert res.work[0].highlights == ["Shipped"]


@pytest.mark.parametrize(
    "text",
    [
        "basics: [1, 2]\n",
        "work: nope\n",
        "basics:\n  name: [a]\n",
        "- a\n- b\n",
        "basics: {name: \n",
        "skills:\n  - keywords: word\n",
    ],
)
def test_invalid_resume_raises(text):
    with pytest.raises(ValueError):
        parse_resume(text)