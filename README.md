# practice-apps

This package holds a handful of small, self-contained programs. You can run each one as a command or import it as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `grade-recorder`

```
grade-recorder
```

The command first asks for your name and for how many subjects you took. If the count is not a positive whole number, it exits with status 1.

It then reads one `Subject Grade` line per subject, for example `English 85`. A line is rejected, and asked for again, when:

- it has fewer than two fields,
- the grade is not a whole number,
- the grade is outside 0–100,
- the subject already has a non-zero grade.

At the end it prints a coloured summary of the grades and their average. The average is truncated to a whole number.

The module `practice_apps.grades` also provides these functions, which you can use directly:

- `parse_entry(line, subjects)` raises `GradeError` when it rejects a line.
- `calculate_average(total, count)`
- `format_summary(name, subjects)`

### `palindrome-check`

```
palindrome-check
```

The command reads one line and reports whether it is a palindrome. The comparison is exact, byte by byte on the UTF-8 encoding. It does not ignore case or spaces.

The check itself is `practice_apps.palindrome.is_palindrome(text)`.

### `word-frequency`

```
word-frequency
```

The command reads one line and prints a table of how often each character occurs. The character `!` is not counted.

The counting function is `practice_apps.word_frequency.character_frequency(text)`, and `format_table(frequencies)` builds the table.

### `library-manager`

```
library-manager
```

This is an interactive console library. Choose `1` on the landing menu to sign in with a name. You then get a menu to:

- add a book,
- remove a book by ID,
- list available books,
- list borrowed books,
- borrow a book by ID,
- return a book by ID.

After each action the program asks whether to continue (`y`/`n`). Choose `7` to leave the menu.

### `task-api`

```
task-api [--host HOST] [--port PORT] [--mongo-uri URI]
```

This command serves an HTTP API for tasks stored in MongoDB.

| Option        | Default                     |
|---------------|-----------------------------|
| `--host`      | `0.0.0.0`                   |
| `--port`      | `8080`                      |
| `--mongo-uri` | `mongodb://localhost:27017` |

Tasks are kept in the collection `tasks` of the database `task_management_api`.

| Method | Path          | Effect                                                         |
|--------|---------------|----------------------------------------------------------------|
| GET    | `/tasks`      | list all tasks                                                 |
| GET    | `/tasks/<id>` | fetch one task (404 if missing)                                |
| POST   | `/tasks`      | create a task with a newly generated UUID as its ID (201)      |
| PUT    | `/tasks/<id>` | replace title, description, due date and status (404 if missing) |
| DELETE | `/tasks/<id>` | delete a task (404 if missing)                                 |

Tasks are JSON objects with the string fields `ID`, `Title`, `Description`, `DueDate` and `Status`. Keys in request bodies are matched ignoring case. A body that is not a JSON object, or that has a non-string field, gets a 400 response of the form `{"error": "Invalid input"}`.

## Library use

```python
from practice_apps.library import Library, Member
from practice_apps.palindrome import is_palindrome
from practice_apps.word_frequency import character_frequency

library = Library()
library.add_member(Member(id=0, name="Ada"))
library.add_book("Dune", "Frank Herbert")
library.borrow_book(0, 0)
print(library.borrowed_books(0))

print(is_palindrome("racecar"))        # True
print(character_frequency("hello!"))   # {'h': 1, 'e': 1, 'l': 2, 'o': 1}
```

Failed library operations raise `LibraryError`. For example:

- removing an unknown book,
- borrowing a book that is already lent out,
- returning a book the member does not hold.

`Library.borrowed_books(member_id)` lists every book that is currently lent out, whichever member holds it.

You can also build the task API yourself. Call `practice_apps.task_api.create_app(store)` with a `practice_apps.task_store.TaskStore`. A `TaskStore` can wrap any collection that has the pymongo API, or you can get one from `connect(uri, database, collection)`.

In both cases, failures raise `TaskStoreError`, and a missing task raises `TaskNotFound`.

## Limitations

- The library manager keeps everything in memory. Books and members are lost when the program exits.
- The library manager has no manager or administrator mode. Choosing `2` on the landing menu only prints a message and ends.
- The task API has no storage other than MongoDB.
- The task API has no authentication.
- When a task cannot be stored, the create request still answers 201; the failure is only logged.