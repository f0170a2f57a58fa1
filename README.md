# sniffkit

Building blocks for a network traffic monitor: interface texts in sixteen
languages, helpers that turn raw traffic figures into readable strings, and
a check for newer releases.

## Languages

`sniffkit.language.Language` is an enum of the supported languages:
English, Italian, French, Spanish, Polish, German, Ukrainian, Simplified
Chinese, Romanian, Korean, Portuguese, Turkish, Russian, Greek, Persian and
Swedish.

```python
from sniffkit.language import Language

Language.default()            # Language.EN
Language.IT.radio_label()     # "Italiano"
Language.rows()               # the sixteen languages in four rows of four, for a picker
```

## Interface texts

Each text is a function that takes a `Language` (and, for some, the values
to fill in) and returns a string. They are grouped by where they appear:

| Module                         | Texts for                                              |
|--------------------------------|--------------------------------------------------------|
| `sniffkit.setup_texts`         | adapter and filter selection, settings, quit dialogs   |
| `sniffkit.status_texts`        | waiting and empty states, filtered totals, errors      |
| `sniffkit.report_texts`        | charts, report sorting, themes, titles                 |
| `sniffkit.notification_texts`  | thresholds, sounds, notification log                   |
| `sniffkit.texts_extra`         | connection details, hosts, search results              |

```python
from sniffkit.language import Language
from sniffkit.setup_texts import start_translation
from sniffkit.status_texts import waiting_translation
from sniffkit.notification_texts import packets_exceeded_value_translation
from sniffkit.texts_extra import showing_results_translation

start_translation(Language.IT)                          # "Avvia!"
waiting_translation(Language.EN, "eth0")                # message naming the adapter
packets_exceeded_value_translation(Language.EN, 1)      # "1 packet has been exchanged"
showing_results_translation(Language.EN, 1, 20, 150)    # "Showing 1-20 of 150 total results"
```

The texts in `setup_texts`, `status_texts`, `report_texts` and
`notification_texts` exist in every language. Those in `texts_extra` are
translated into only some languages; for the others they are given in
English.

## Formatting helpers

`sniffkit.formatted_strings` turns traffic figures into display strings:

```python
from sniffkit.formatted_strings import (
    get_domain_from_r_dns,
    get_formatted_bytes_string,
    get_percentage_string,
    get_report_path,
    get_socket_address,
)

get_formatted_bytes_string(1500)            # "1.5 K"
get_formatted_bytes_string(999)             # "999  "
get_percentage_string(200, 50)              # "25.0%"
get_socket_address("192.0.2.10", 443)       # "192.0.2.10:443"
get_socket_address("::1", 443)              # "[::1]:443"
get_domain_from_r_dns("mail.example.com")   # "example.com"
get_report_path()                           # report.txt in the user's config directory
```

Byte quantities use the multiples K, M, G and T (powers of 1000) with one
decimal. A percentage that rounds to zero is shown as `<0.1%`. Negative
counts raise `ValueError`. `get_domain_from_r_dns` leaves IP addresses and
single-label names unchanged.

`get_open_report_tooltip(language)` builds the tooltip that points at the
report file, its label centred above the path, and
`print_cli_welcome_message()` prints the start-up banner with `APP_VERSION`.

## Web pages

`sniffkit.web_page.WebPage` names the project pages the interface can open;
`WebPage.REPO.url()` and `WebPage.WEBSITE_DOWNLOAD.url()` give their addresses.

## Release checks

`sniffkit.check_updates` asks the release service at `LATEST_RELEASE_URL`
whether a version newer than the installed one has been published:

```python
from sniffkit.check_updates import (
    UpdateCheckError,
    is_newer_release_available,
    is_newer_version,
    newer_release_status,
)

is_newer_version("v1.3.0", "1.2.0")         # True

try:
    available = is_newer_release_available(6, 30, None)
except UpdateCheckError as error:
    print(f"could not check for updates: {error}")
```

Release names of the form `vX.Y.Z` with single digits are understood, and
compared with the current version as text; anything else raises
`UpdateCheckError`. Failed requests are retried up to `max_retries` times in
all, waiting `seconds_between_retries` seconds between attempts; a
`requests.Session` may be passed to make the requests. `newer_release_status()`
runs the check with 6 attempts and 30 seconds between them, and returns
either the boolean result or the `UpdateCheckError` it met.

## What this package does not do

sniffkit does not capture or parse packets, does not draw a user interface
and does not write the traffic report file. It supplies the texts, strings
and release check that a monitoring program built on top of it would show.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.