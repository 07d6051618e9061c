# aedsuite

Two console tools that work on CSV data:

* **a student timetable manager**: view the lessons of a student, a class or
  a curricular unit (UC), list who is enrolled where, leave a UC, and queue
  requests to join or change classes. A request is granted only when the new
  lessons cause no clash and the class sizes of the UC stay balanced;
* **a flight network planner**: load airports, airlines and flights, find the
  routes with the fewest flights between airports, cities or coordinates,
  optionally using only chosen airlines, and view statistics for one airport,
  for one country or for the whole network.

The interactive menus are in Portuguese.

There are no runtime dependencies beyond the Python standard library.
Python 3.10 or later is required.

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

### `aedsuite-schedule [DATA_DIR] [--max-capacity N]`

This command starts the timetable menu. `DATA_DIR` defaults to `../schedule`
and must contain these files:

| file                   | columns                                                  |
|------------------------|----------------------------------------------------------|
| `classes.csv`          | ClassCode, UcCode, Weekday, StartHour, Duration, Type    |
| `students_classes.csv` | StudentCode, StudentName, UcCode, ClassCode              |
| `classes_per_uc.csv`   | UcCode, ClassCode                                        |

The first line of each file is a header. Reading stops at the first empty line.

`--max-capacity` is the largest number of students allowed in one class of a
UC. The default is 23.

From the menu you can:

* view a timetable, sorted in one of these orders: ascending (the default),
  descending, theoretical lessons first, by UC code, or by duration;
* list students by class, by UC, by UC within a class, by year (1, 2 or 3),
  or those with more than *n* enrolments;
* leave a UC. This takes effect at once;
* queue a join, a class change, or a set of changes that must all succeed or
  all fail;
* check how many of your requests are still pending and how many were
  rejected.

Queued requests are decided each time the main menu is shown again. A request
is rejected in any of these cases:

* a practical lesson of the target class overlaps another lesson of the
  student;
* the target class would exceed the maximum capacity;
* the class sizes of the UC would differ by 4 or more.

### `aedsuite-flights [DATA_DIR]`

This command starts the flight menu. `DATA_DIR` defaults to `../files_to_read`
and must contain these files:

| file           | columns                                          |
|----------------|--------------------------------------------------|
| `airports.csv` | Code, Name, City, Country, Latitude, Longitude   |
| `airlines.csv` | Code, Name, Callsign, Country                    |
| `flights.csv`  | Source, Target, Airline                          |

Origins and destinations can be given in three ways:

* an airport code;
* a city name. If the city name exists in more than one country, you are asked
  for the country;
* a latitude and longitude. The planner uses the airports nearest to that
  point. It searches within 25 km first and widens the radius by 10 km each
  time until it finds an airport.

## Library use

### Timetables and enrolment

```python
from aedsuite.loader import read_classes, read_students, read_classes_per_uc
from aedsuite.registry import Registry
from aedsuite.enrolment import EnrolmentOffice
from aedsuite.timetable import SortOrder, sort_lessons, format_lesson

registry = Registry(
    read_classes("schedule/classes.csv"),
    read_students("schedule/students_classes.csv"),
    read_classes_per_uc("schedule/classes_per_uc.csv"),
)

for lesson in sort_lessons(registry.class_schedule("1LEIC01"), SortOrder.DEFAULT):
    print(format_lesson(lesson))

office = EnrolmentOffice(registry, max_capacity=23)
office.submit_change("202020047", "L.EIC001", "1LEIC02")
for request, accepted in office.process_pending():
    print(request, accepted)
```

The `submit_*` methods validate their input before queuing anything:

* an unknown student raises `KeyError`;
* a class that does not offer the UC raises `ValueError`;
* an enrolment state that does not allow the request raises `ValueError`.

Requests that pass validation are queued. `process_pending()` then decides
them in the order they were submitted.

### Flights

```python
from aedsuite.airports import read_airports
from aedsuite.airlines import read_airlines
from aedsuite.network import read_flights
from aedsuite.planner import best_routes, airports_near, top_airports

airports = read_airports("files_to_read/airports.csv")
airlines = read_airlines("files_to_read/airlines.csv")
network = read_flights("files_to_read/flights.csv", airports)

print(network.flights_from("OPO"))
print(network.reachable("OPO", 2))
print(best_routes(network, ["OPO"], ["JFK"], {"TAP"}))
print(airports_near(airports, 41.15, -8.61))
print(top_airports(network, 10))
```

A route is a tuple of `(airport code, airline taken from it)` pairs. The last
airport in a route has an empty airline.

## What it does not do

* The timetable manager keeps all changes in memory only. Leaving a UC and
  granted requests are never written back to the CSV files. When the program
  exits, they are lost.
* The flight planner counts the number of flights in a route only. It does
  not consider distances, times, prices or seat availability.