# reumes

A resume data model that follows the JSON Resume schema. It reads a resume
written in YAML (or JSON, which is a subset of YAML) into dataclasses and
exports it as a plain dictionary, keyed by the schema's field names, ready to
be handed to a template engine.

## Installation

```
pip install .
```

## Usage

```python
from reumes.resume import parse_resume

with open("resume.yaml", encoding="utf-8") as handle:
    resume = parse_resume(handle.read())

print(resume.basics.name)
for job in resume.work:
    print(job.position, job.start_date, job.highlights)

context = resume.export_context()
context["basics"]["location"]["postalCode"]
```

`load_resume(data)` does the same for data that has already been parsed, such
as the result of `json.load`.

## The resume file

The input holds the sections of the JSON Resume schema: `basics`, `work`,
`volunteer`, `education`, `awards`, `certificates`, `publications`, `skills`,
`languages`, `interests`, `references` and `projects`.

```yaml
basics:
  name: Jane Doe
  label: Engineer
  email: jane@example.com
  location:
    city: Springfield
work:
  - name: Example Corp
    position: Developer
    startDate: 2020-01-15
    highlights:
      - Shipped things
```

How values are read:

- Each section is a dataclass in `reumes.resume`: `Resume`, `Basics`,
  `Location`, `Profile`, `Work`, `Volunteer`, `Education`, `Award`,
  `Certificate`, `Publication`, `Skill`, `Language`, `Interest`, `Reference`
  and `Project`. Attribute names are the snake-case forms of the schema keys
  (`startDate` becomes `start_date`, `postalCode` becomes `postal_code`).
- Keys that are missing, or set to null, leave the field empty: `""` for text,
  `[]` for lists. Unknown keys are ignored.
- Every scalar is kept as text. Dates stay exactly as written, numbers become
  their string form, and booleans become `"true"` or `"false"`.
- A value of the wrong shape (a list where a mapping is expected, a mapping
  where text is expected, and so on) raises `ValueError` naming the field.
  Text that is not valid YAML raises `ValueError` as well.

`Resume.export_context()` returns nested dictionaries and lists using the
schema's own key names (`startDate`, `countryCode`, `releaseDate`, ...), with
every section present.

## What this package does not do

It has no command-line program and no templates: it does not render a resume
to a file, run post-processing commands, or look up template files. It covers
reading resume data and exporting it as a context dictionary.