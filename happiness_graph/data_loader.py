# THIS FILE ONLY TURNS THE CSV INTO COUNTRY RECORDS. NO GRAPH STUFF IN HERE

import csv
import math
from dataclasses import dataclass

from happiness_graph.constants import COLUMNS, NUMERIC_FIELDS
from happiness_graph.errors import LoadError


@dataclass(frozen=True)
class Country:
    name: str
    region: str
    happiness_score: float
    happiness_rank: float
    gdp: float
    health: float
    family: float
    government_corruption: float

    def describe(self) -> str:
        return (
            f"Country: {self.name}, Region: {self.region}, "
            f"Happiness Score: {self.happiness_score}, Rank: {self.happiness_rank}, "
            f"GDP: {self.gdp}, Health: {self.health}, Family: {self.family}, "
            f"Corruption: {self.government_corruption}"
        )


def parse_row(row, path=None, line=None) -> Country:

    # any missing or broken field kills the whole load, no defaults

    values = {}
    for position, (field, label) in enumerate(COLUMNS):

        if position >= len(row):
            raise LoadError(f"missing {label}", path=path, line=line, field=field)

        raw = row[position].strip()

        if field in NUMERIC_FIELDS:
            try:
                number = float(raw)
            except ValueError:
                raise LoadError(f"malformed {label}: {raw!r}", path=path, line=line, field=field) from None

            if not math.isfinite(number):
                raise LoadError(f"non-finite {label}: {raw!r}", path=path, line=line, field=field)
            values[field] = number

        else:
            if not raw:
                raise LoadError(f"missing {label}", path=path, line=line, field=field)
            values[field] = raw

    return Country(**values)


class HappinessLoader:

    def __init__(self, filepath: str):

        self.filepath = filepath
        self.countries = {}
        self.regions = set()
        self.duplicates = []

    def load(self):

        try:
            f = open(self.filepath, 'r', newline='', encoding='utf-8')
        except OSError as e:
            raise LoadError(f"cannot open data file ({e.strerror})", path=self.filepath) from e

        with f:
            reader = csv.reader(f)

            # bad bytes / broken quoting only show up once we start reading
            try:
                self._read_rows(reader)
            except (UnicodeDecodeError, csv.Error) as e:
                raise LoadError(f"unreadable csv ({e})", path=self.filepath, line=reader.line_num or None) from e

        self.regions = {c.region for c in self.countries.values()}

        if not self.countries:
            raise LoadError("no country rows found", path=self.filepath)

        return self.countries

    def _read_rows(self, reader):

        # first row is the header, we go by position anyway
        header = next(reader, None)
        if header is None:
            raise LoadError("empty file, no header row", path=self.filepath)

        for row in reader:
            if not any(cell.strip() for cell in row):
                continue

            country = parse_row(row, path=self.filepath, line=reader.line_num)

            # same name twice -> later row wins, but say so
            if country.name in self.countries:
                self.duplicates.append(country.name)
                print(f"  warning: {country.name} appears more than once, keeping line {reader.line_num}")

            self.countries[country.name] = country
