# trainstation

A small in-memory model of a railway network: stations, trains running
between them, wagons of several classes with seat booking and ticket
prices, and discount cards for passengers.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `trainstation.ids` – `generate_id(length)`, a random identifier of
  `length` decimal digits (leading zeros allowed).
- `trainstation.wagons` – `Wagon` and its classes `FirstClassWagon`,
  `PassengerClassWagon` and `SleepingWagon`.
- `trainstation.network` – `Station` and `Train`.
- `trainstation.cards` – `DiscountCard` and its classes
  `AgeDiscountCard`, `DistanceDiscountCard` and `RouteDiscountCard`.
- `trainstation.users` – `User`, `Admin`, `read_train_ids` and the
  `main` function behind the `trainstation` command.

## Stations, trains and wagons

```python
from datetime import datetime

from trainstation.network import Station, Train
from trainstation.wagons import FirstClassWagon, PassengerClassWagon, SleepingWagon

sofia = Station("Sofia")
plovdiv = Station("Plovdiv")

train = Train(sofia, plovdiv, 150, 75, datetime(2030, 5, 1, 8, 30))
sofia.add_train(train)
plovdiv.add_train(train)

first = FirstClassWagon(40.0, 0.8, True)
train.add_wagon(first)
train.add_wagon(PassengerClassWagon(20.0, 1.5, 10.0))
train.add_wagon(SleepingWagon(30.0, 12.0, 150))

first.buy_ticket(3)
print(first.ticket_price())        # 42.0
print(first.render())              # seat map, sold seats shown as "xx"

print(train.departure_time_text())  # "08:30 01.05.2030"
print(train.arrival_time_text())    # "10:30 01.05.2030"
print(train.info())
```

A train's arrival time is its departure time plus the travel time in
whole hours (`distance_km // speed`). A train gets a random four-digit
id; `find_wagon` and `remove_wagon` raise `ValueError` for an unknown
wagon id. `is_departed(now)` is true once the departure time has been
reached; `now` defaults to the current local time.

Each wagon class has its own seat count and price rule:

- `FirstClassWagon` – 10 seats; base price times a comfort factor
  (between 0 and 1), plus 10 when food is included.
- `PassengerClassWagon` – 20 seats; base price plus luggage weight times
  the price per kilogram.
- `SleepingWagon` – 5 beds; base price plus the price per 100 km scaled
  by the distance.

Seats are numbered from 1. Invalid values (a non-positive base price, a
comfort factor outside 0..1, a seat that does not exist or is already
taken, and so on) raise `ValueError`. `has_bought_seats()` tells whether
any seat of a wagon has been sold.

The `print_*` methods (`print_wagon`, `print_train_info`,
`print_departures`, `print_arrivals`, `print_card`) write the same text
as their non-printing counterparts to standard output and return it.

### Timetables

```python
now = datetime(2030, 5, 1, 7, 0)
print(sofia.departures_table(now))   # status "To depart" or "Departed"
print(plovdiv.arrivals_table())
```

## Discount cards

```python
from trainstation.cards import AgeDiscountCard, DistanceDiscountCard, RouteDiscountCard

card = AgeDiscountCard("Maria Ivanova", 15)
print(card.discount_percents)   # 50
print(card.render())

print(DistanceDiscountCard("Petar Petrov", 500, 120).render())
print(RouteDiscountCard("Elena Georgieva", "Varna").render())
```

- Age cards give 100% under 11 years, 50% from 11 to 18, 20% otherwise.
- Distance cards give 50% while the travelled distance stays within the
  card's limit, 30% beyond it.
- Route cards give 100% on their route.

Each card has a random six-digit id.

## Users and administrators

```python
from trainstation.users import Admin, User

trains, stations = [], []
password = "password"
admin = Admin("admin", password, trains, stations)
admin.login("admin", password)

admin.add_station("Sofia")
admin.add_station("Varna")
train = admin.add_train("Sofia", "Varna", 440, 80, datetime(2030, 5, 1, 9, 0))
wagon = admin.add_wagon(train.id, PassengerClassWagon(20.0, 1.5, 10.0))

user = User("Ivan", trains, stations, age=30)
print(user.schedule("Sofia"))
print(user.train_info(train.id))
price = user.buy_ticket(train.id, wagon.id, 1)
print(user.wagon_layout(train.id, wagon.id))
```

`User` finds stations and trains (`find_station`, `find_train`, both
raising `ValueError` when nothing matches), returns schedules, train
details and wagon seat maps, and buys a seat, returning the ticket
price. `stations_listing(path)` returns the lines of a text file of
station names (`Stations.txt` by default).

`Admin` must `login` first; a wrong name or password, or any management
call before logging in, raises `PermissionError`. It can add stations
(names must be unique), add and remove trains (stations may be given by
name or as `Station` objects; a new train is registered with both of
its stations), add and remove wagons, and `move_wagon` between two
trains that have not yet departed, provided none of the wagon's seats
has been sold.

## Command line

```
trainstation [TRAINS_FILE]
```

Given a file of whitespace-separated train ids, prints each id on its
own line (`read_train_ids` raises `ValueError` on a token that is not an
integer). Without an argument it does nothing and exits with status 0.

## What it does not do

- Everything lives in memory: stations, trains, wagons, tickets and
  cards are not saved anywhere, and the command only lists the ids found
  in a file; it does not load trains or run an interactive session.
- Discount cards are not applied when buying a ticket, and there is no
  card registry or validation of issued cards.
- There is no lookup of schedules by destination or by time.