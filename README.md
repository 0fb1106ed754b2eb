# librarysys

A small library management model: users, catalogue resources (books, articles,
theses), loans, reservations, notifications and library events, with saving to
and loading from a single JSON file.

## Installation

```
pip install .
```

Install the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Overview

| Module | Contents |
| --- | --- |
| `librarysys.user` | `User`, `UserRole`, and the checks `is_valid_user_id`, `is_valid_name`, `is_valid_email`. |
| `librarysys.resource` | `Resource`, the base of all catalogue entries, and `contains_ignoring_case`. |
| `librarysys.book` | `Book`, with ISBN, publisher, page count and edition. |
| `librarysys.article` | `Article`, with magazine, volume, issue, DOI and page range. |
| `librarysys.thesis` | `Thesis` and `ThesisType`. |
| `librarysys.catalog` | `resource_from_json`, which builds a `Book` or an `Article` from its `"type"` field. |
| `librarysys.loan` | `Loan` and `LoanError`. The renewal limit and the loan period are shared by all loans. |
| `librarysys.reservation` | `Reservation`, `ReservationStatus` (pending, fulfilled, canceled) and `ReservationError`. |
| `librarysys.notification` | `Notification`, which can be marked as read. |
| `librarysys.event` | `LibraryEvent`, dated from yesterday up to one year ahead. |
| `librarysys.persistence` | `LibraryData`, `save_to_file`, `load_from_file` and `PersistenceError`. |

## How invalid data is handled

- `User`, `Loan` and `Reservation` constructors replace invalid identifiers with
  empty strings (and invalid dates with 0, or for a reservation the current
  time), logging a warning. Assigning an invalid `user_id`, `name` or `email`
  to an existing `User` raises `ValueError`.
- `Resource` and its subclasses replace invalid values with placeholders such as
  `"Unknown Title"`, `"INVALID_ID"`, `"N/A"` or `-1`. Assigning an invalid
  `university`, `department`, `supervisor` or `page_count` to a `Thesis` raises
  `ValueError`.
- `Notification` and `LibraryEvent` raise `ValueError` for any invalid detail.
- `Loan.renew()` and `Loan.mark_returned()` raise `LoanError`;
  `Reservation.cancel()` and `Reservation.fulfill()` raise `ReservationError`.

## Example

```python
import time

from librarysys.user import User, UserRole
from librarysys.book import Book
from librarysys.loan import Loan
from librarysys.persistence import LibraryData, save_to_file, load_from_file

alice = User("u-001", "Alice Smith", "alice@example.com", UserRole.STUDENT)
book = Book("Dune", "Frank Herbert", "B-100", "Fiction", 1965,
            "Chilton", 412, "978-0441013593", "1st")

now = int(time.time())
loan = Loan("L-001", alice.user_id, book.resource_id, now, now + Loan.loan_period)
new_due_date = loan.renew()

data = LibraryData(users=[alice], resources=[book], loans=[loan])
save_to_file("library.json", data)

restored = load_from_file("library.json")
print(restored.resources[0].formatted_info())
```

`save_to_file` keeps a `.backup` copy of any file it replaces and stores the
current `Loan.max_renewals` and loan period (in days) in a `config` section;
`load_from_file` applies them again through `Loan.set_max_renewals` and
`Loan.set_loan_period`. The path must end in `.json`. If a file cannot be
written, read or understood, a `PersistenceError` is raised.

Search helpers such as `matches_keyword`, `matches_author` and
`matches_category` ignore ASCII case. A `Book` also searches its publisher and
ISBN, an `Article` its magazine and DOI, and a `Thesis` its university,
department, supervisor, degree and abstract.

## What this package does not do

- It is a library of model classes only: there is no command-line program, menu
  or other user interface.
- `resource_from_json`, and so `load_from_file`, only knows books and articles.
  A `Thesis` can be saved, but loading a file that contains one raises
  `PersistenceError`; use `Thesis.from_json` directly for such records.
- Storage is a single JSON file; there is no database and no locking between
  processes.