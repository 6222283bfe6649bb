# kplot

Data sources for plots. Each source holds an ordered series of `(x, y)`
pairs and can notify dependant sources whenever one of its pairs changes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Data sources

All sources are `kplot.data.KData` objects. They have a length, can be
indexed and iterated, and give back frozen `KPair` values with `x` and `y`
attributes. Each has a `kind` (a `kplot.data.DataType`), a `pairs`
property holding a tuple snapshot of its pairs, and a `dependants`
property listing the sources attached to it. `KData.set(index, x, y)`
replaces one pair; an index out of range raises `IndexError`.

- `kplot.array.ArrayData(pairs)` is a fixed-size series built from
  `KPair` values or `(x, y)` tuples. `ArrayData.of_size(n)` gives `n`
  pairs whose x values run from 0 to `n - 1` and whose y values are 0
  (a negative size raises `ValueError`). Fill the y values with
  `fill_y(values)` (fewer values than pairs raises `ValueError`), set
  every pair from a function with `fill(func)`, where `func(index)`
  returns an `(x, y)` pair, change one pair with `set(index, x, y)`, or
  add to its y value with `add(index, value)`.
- `kplot.bucket.BucketData(rmin, rmax)` holds one pair for each integer
  in `[rmin, rmax)`, with x set to that integer. Address buckets by their
  value, not by their position: `add(value, amount)` and
  `set(value, x, y)`. A value outside the range raises `IndexError`; a
  negative `rmin` or an `rmax` below `rmin` raises `ValueError`.
- `kplot.buffer.BufferData(hint=0)` starts with `hint` zero pairs.
  `copy_from(source)` resizes it to the size of another source and copies
  that source's pairs.

```python
from kplot.bucket import BucketData

counts = BucketData(10, 20)
counts.add(12, 1.0)
counts.add(12, 1.0)
print(counts[2])            # KPair(x=12.0, y=2.0)
```

## Dependants

A source may be attached to another with
`KData.add_dependant(dependant, func)`; a source cannot be attached to
itself. Whenever a pair of the parent is stored, whether by `set`, `add`,
`fill`, `fill_y` or `copy_from`, `func(dependant, index, x, y)` is called
so that the dependant can update itself. `run_dependants(index)` repeats
the notification for one pair.

## Colours

`kplot.colours.ColourConfig` describes how a series is coloured. Its
`type` is a `ColourType` (`DEFAULT`, `PALETTE` or `PATTERN`), with a
`palette` index and an optional `pattern` object. Calling
`init_palette(n)` on a configuration still set to the default switches it
to palette colour number `n`. Palette configurations are left as they
are; a pattern configuration without a pattern raises `ValueError`.

## What this package does not do

It only models plot data and colour settings. It does not draw plots,
render images or write picture files, and it has no histogram, mean,
standard-deviation or vector sources of its own, even though
`DataType` names those kinds.