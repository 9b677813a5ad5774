# hellokit

A collection of small, self-contained utilities.

## Installation

```
pip install hellokit
```

To run the test suite:

```
pip install "hellokit[test]"
pytest
```

## Highlights

### Directory reader with processing status

`hellokit-freader` watches a directory for files that match a name pattern
and reads them line by line as they grow, much like `tail -f` across a
whole series of files. Each line goes to a text module. Plain text files
(`PTailReader`), gzip files (`GzipReader`) and pcap captures (`PcapReader`)
are supported through the `--reader_type` option. Finished files are
recorded in a status file, so a restart skips the files that were already
processed. With `--priority_level N` the subdirectories `0` to `N-1` are
read in order instead of the directory itself.

```
hellokit-freader --help
```

The building blocks can also be used directly from Python:

```python
from hellokit.process_status import ProcessStatus

with ProcessStatus("status.txt") as status:
    if not status.is_processed("inc_1.gz"):
        ...
```

`hellokit.fsutil.lookup_files(directory, pattern)` walks a directory tree
and returns every file whose name matches a glob pattern.

### File system events

`hellokit-watch` logs every file system event under a directory and also
starts watching directories created inside it.
`hellokit-serf-handler` logs the user event name from the
`SERF_USER_EVENT` environment variable together with the payload read from
standard input.

### Housing statistics

`hellokit-fangcrawl` fetches the Beijing housing transaction page, extracts
the daily and monthly counts with `hellokit.housing.BeijingHouseParser`,
and writes them as JSON, keyed by yesterday's date and last month, into an
output directory (`--output`, with a log file set by `--logfile`).

`hellokit-siteinfo` fetches a few sites (or the URLs given on the command
line) and reports each one's description and icon;
`hellokit.siteinfo.extract_site_info(html)` does the extraction on its own.

### Small web server

`hellokit-echo-http` answers requests to `/echo` with up to 128 KiB of the
request body (port 8091 by default, set with `--port`); other paths get 404.

### Encodings and data structures

- `hellokit.protowire`: protobuf wire format encoding for a registration
  message with a string map (`RegMessage`) and a nine-integer message
  (`IntFields`), plus varint helpers (`encode_varint`, `decode_varint`).
  Run `hellokit-protowire` for a demo, or `hellokit-protowire --decode
  <base64>` to decode a registration message.
- `hellokit.docid.DocId`: a pair of unsigned 32-bit integers packed as two
  varints.
- `hellokit.cedar.Trie`: a byte-keyed prefix trie with exact lookups,
  prefix matching, prefix prediction and saving to and loading from a JSON
  file. Run `hellokit-cedar` for a demo.
- `hellokit.promise.Promise`: a thread-safe promise that can be resolved,
  rejected or cancelled, with success, failure and completion callbacks.
- `hellokit.xmltokens`: a stream of XML tokens, and an indented listing of
  them (`hellokit-xmltokens`).
- `hellokit.classroll`: a classroom roster that converts to and from XML
  (`hellokit-classroll`).
- `hellokit.htmlquery.select(markup, selector)`: CSS selection over HTML
  with `html()`, `text()`, `attr()`, `attrs()` and `has_class()`
  (`hellokit-htmlquery`).
- `hellokit.products.ProductStore`: a small SQLite-backed product table
  with soft deletion (`hellokit-products`).

### Odds and ends

- `hellokit.newmath.sqrt(x)`: square root by Newton's method.
- `hellokit-echo` reads a number and a word from standard input and prints
  them back along with the word's byte length and a few slices of it.
- `hellokit-importscan` lists the search paths given on the command line
  and in `GOPATH`, and scans them for `.go` files.
- `hellokit-xmalloc` prints a string of the requested length filled with
  digits or, when longer than ten, with the letter `a`.
- `hellokit-greet`, `hellokit-hello`, `hellokit-tasks` and `hellokit-proxy`
  are small command-line demos covering a greeting, a greeting with a
  `--lang` flag, a task list with subcommands, and a command dispatcher.

## What hellokit does not do

- It has no compound-interest calculator, neither as a function nor as a
  web form; the only web server is the `/echo` server.
- The housing statistics are only written out as JSON files. Nothing reads
  the day and month figures back from those files, and nothing stores them
  in a database.