"""
# Bridge to the standard library's &datetime types.

# The fields and units of Internet Time only need a small surface from a temporal value:
# the millisecond of the day, the UTC offset, a way to replace the millisecond of the day,
# and millisecond arithmetic. These are provided by the single dispatch functions in this
# module; types other than &datetime.datetime and &datetime.time can participate by
# registering implementations:

#!python
	from inettime.beat import standard

	@standard.milli_of_day.register(MyTimestamp)
	def _(ts):
		return ts.select('millisecond', 'day')

# The module also defines the standard fields and units, addressed by name as
# `(part, of)` pairs and unit identifiers, that &.types.InternetTime supports in
# addition to its own.

# [ Elements ]

# /fields/
	# Mapping of `(part, of)` pairs to &Field instances.
# /exact_units/
	# Mapping of unit identifiers to their exact millisecond lengths.
# /calendar_units/
	# Mapping of unit identifiers to their length in gregorian months.
"""
import calendar
import datetime
import functools

from . import core
from . import constants

utc = datetime.timezone.utc
one_microsecond = datetime.timedelta(microseconds=1)
one_second = datetime.timedelta(seconds=1)

def quotient(numerator, denominator):
	"""
	# Integer division truncating toward zero.
	"""
	q = abs(numerator) // denominator
	return q if numerator >= 0 else -q

def complete_milliseconds(delta:datetime.timedelta) -> int:
	"""
	# The number of complete milliseconds in the &delta, truncated toward zero.
	"""
	return quotient(delta // one_microsecond, 1000)

def time_milliseconds(t) -> int:
	return (((t.hour * 60) + t.minute) * 60 + t.second) * 1000 + (t.microsecond // 1000)

def fixed_offset(offset) -> datetime.tzinfo:
	"""
	# Interpret &offset as a fixed UTC offset.

	# [ Parameters ]
	# /offset/
		# A &datetime.tzinfo with a fixed offset, a &datetime.timedelta, or
		# an integer number of seconds.
	"""
	if offset is None:
		raise core.MissingArgument('offset')
	if isinstance(offset, datetime.tzinfo):
		if offset.utcoffset(None) is None:
			raise core.UnsupportedTemporalType("offset is not fixed: " + repr(offset))
		return offset
	if isinstance(offset, datetime.timedelta):
		return datetime.timezone(offset)
	return datetime.timezone(datetime.timedelta(seconds=offset))

def offset_total_seconds(tz:datetime.tzinfo) -> int:
	return tz.utcoffset(None) // one_second

# Generic temporal interface.

@functools.singledispatch
def milli_of_day(temporal):
	"""
	# The milliseconds elapsed since the local midnight of &temporal,
	# or &None when the type does not have a time of day.
	"""
	return None

@milli_of_day.register(datetime.datetime)
@milli_of_day.register(datetime.time)
def _milli_of_datetime(temporal):
	return time_milliseconds(temporal)

@functools.singledispatch
def offset_seconds(temporal):
	"""
	# The UTC offset of &temporal in seconds, or &None when the offset is unknown.
	"""
	return None

@offset_seconds.register(datetime.datetime)
@offset_seconds.register(datetime.time)
def _offset_of_datetime(temporal):
	offset = temporal.utcoffset()
	if offset is None:
		return None
	return offset // one_second

@functools.singledispatch
def replace_milli_of_day(temporal, millis):
	"""
	# Construct a new instance of &temporal whose time of day is &millis.
	"""
	raise core.UnsupportedTemporalType(
		"millisecond of day not supported by " + temporal.__class__.__name__
	)

@replace_milli_of_day.register(datetime.datetime)
@replace_milli_of_day.register(datetime.time)
def _replace_datetime_millis(temporal, millis):
	if not 0 <= millis <= constants.max_milli_of_day:
		raise core.RangeError('MilliOfDay', millis, 0, constants.max_milli_of_day)

	seconds, ms = divmod(millis, 1000)
	minutes, second = divmod(seconds, 60)
	hour, minute = divmod(minutes, 60)
	return temporal.replace(hour=hour, minute=minute, second=second, microsecond=ms * 1000)

@functools.singledispatch
def supports_milliseconds(temporal) -> bool:
	"""
	# Whether &temporal supports millisecond arithmetic with &add_milliseconds
	# and &milliseconds_between.
	"""
	return False

@supports_milliseconds.register(datetime.datetime)
@supports_milliseconds.register(datetime.time)
def _datetime_milliseconds(temporal):
	return True

@functools.singledispatch
def add_milliseconds(temporal, millis):
	"""
	# Construct a new instance of &temporal that is &millis milliseconds later.
	"""
	raise core.UnsupportedTemporalType(
		"millisecond arithmetic not supported by " + temporal.__class__.__name__
	)

@add_milliseconds.register(datetime.datetime)
def _add_datetime_millis(temporal, millis):
	try:
		delta = datetime.timedelta(milliseconds=millis)
		if temporal.tzinfo is None:
			return temporal + delta
		# Elapsed time is measured on the UTC timeline.
		return (temporal.astimezone(utc) + delta).astimezone(temporal.tzinfo)
	except OverflowError as err:
		raise core.Overflow("date arithmetic overflow: " + repr(temporal)) from err

@add_milliseconds.register(datetime.time)
def _add_time_millis(temporal, millis):
	us = (time_milliseconds(temporal) + millis) * 1000 + (temporal.microsecond % 1000)
	us %= constants.millis_per_day * 1000
	wrapped = replace_milli_of_day(temporal, us // 1000)
	return wrapped.replace(microsecond=wrapped.microsecond + (us % 1000))

@functools.singledispatch
def milliseconds_between(start, stop) -> int:
	"""
	# The number of complete milliseconds from &start, inclusive, to &stop, exclusive.
	"""
	raise core.UnsupportedTemporalType(
		"millisecond arithmetic not supported by " + start.__class__.__name__
	)

@milliseconds_between.register(datetime.datetime)
def _datetime_between(start, stop):
	if not isinstance(stop, datetime.datetime):
		stop = to_datetime(stop)
	try:
		return complete_milliseconds(stop - start)
	except TypeError as err:
		# Naive and aware mixture.
		raise core.UnsupportedTemporalType(
			"cannot measure between %r and %r" %(start, stop)
		) from err

@milliseconds_between.register(datetime.time)
def _time_between(start, stop):
	if not isinstance(stop, datetime.time):
		raise core.UnsupportedTemporalType(
			"cannot measure between %r and %r" %(start, stop)
		)
	start_us = time_milliseconds(start) * 1000 + start.microsecond % 1000
	stop_us = time_milliseconds(stop) * 1000 + stop.microsecond % 1000
	a, b = offset_seconds(start), offset_seconds(stop)
	if (a is None) != (b is None):
		# Naive and aware mixture.
		raise core.UnsupportedTemporalType(
			"cannot measure between %r and %r" %(start, stop)
		)
	if a is not None:
		stop_us += (a - b) * 1000000
	return quotient(stop_us - start_us, 1000)

@functools.singledispatch
def to_datetime(temporal) -> datetime.datetime:
	"""
	# Convert &temporal into an aware &datetime.datetime at the same instant.
	"""
	raise core.UnsupportedTemporalType(
		"not convertible to datetime: " + temporal.__class__.__name__
	)

@to_datetime.register(datetime.datetime)
def _datetime_identity(temporal):
	if temporal.utcoffset() is None:
		raise core.UnsupportedTemporalType("local datetime has no offset: " + repr(temporal))
	return temporal

# Calendar arithmetic.

def add_months(dt, months):
	"""
	# Add gregorian months to the date or datetime &dt. The day of month is
	# reduced to the last valid day when the target month is shorter.
	"""
	total = (dt.year * 12) + (dt.month - 1) + months
	year, month = divmod(total, 12)
	if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
		raise core.Overflow("year out of range: %d" %(year,))
	month += 1
	day = min(dt.day, calendar.monthrange(year, month)[1])
	return dt.replace(year=year, month=month, day=day)

def months_between(start, stop) -> int:
	"""
	# The number of complete gregorian months between &start and &stop.
	# Both are expected to be expressed at the same offset.
	"""
	start_date, stop_date = start.date(), stop.date()
	start_time, stop_time = start.timetz(), stop.timetz()
	if stop_date > start_date and stop_time.replace(tzinfo=None) < start_time.replace(tzinfo=None):
		stop_date -= datetime.timedelta(days=1)
	elif stop_date < start_date and stop_time.replace(tzinfo=None) > start_time.replace(tzinfo=None):
		stop_date += datetime.timedelta(days=1)

	packed_start = ((start_date.year * 12) + start_date.month - 1) * 32 + start_date.day
	packed_stop = ((stop_date.year * 12) + stop_date.month - 1) * 32 + stop_date.day
	return quotient(packed_stop - packed_start, 32)

exact_units = {
	'millisecond': 1,
	'second': 1000,
	'minute': 60 * 1000,
	'hour': 60 * 60 * 1000,
	'halfday': 12 * 60 * 60 * 1000,
	'day': constants.millis_per_day,
	'week': 7 * constants.millis_per_day,
}

calendar_units = {
	'month': 1,
	'year': 12,
	'decade': 12 * 10,
	'century': 12 * 100,
	'millennium': 12 * 1000,
}

def elapse(dt, amount, unit):
	"""
	# Add &amount of the named standard &unit to the aware datetime, &dt.
	"""
	if unit in exact_units:
		return add_milliseconds(dt, amount * exact_units[unit])
	return add_months(dt, amount * calendar_units[unit])

def measure(start, stop, unit):
	"""
	# The number of complete standard &unit between the aware datetimes &start and &stop.
	"""
	if unit in exact_units:
		return quotient(milliseconds_between(start, stop), exact_units[unit])
	stop = stop.astimezone(start.tzinfo)
	return quotient(months_between(start, stop), calendar_units[unit])

# Standard fields.

class Field(object):
	"""
	# A named field of an aware datetime.

	# [ Properties ]
	# /part/
		# The unit being counted.
	# /of/
		# The unit bounding the count; &None for unbounded fields.
	# /limits/
		# Function returning the inclusive `(minimum, maximum)` pair for a datetime.
	"""
	__slots__ = ('part', 'of', 'limits', 'get', 'set')

	def __init__(self, part, of, limits, get, set):
		self.part = part
		self.of = of
		self.limits = limits
		self.get = get
		self.set = set

	def __repr__(self):
		return "<standard field %s of %s>" %(self.part, self.of)

	@property
	def key(self):
		return (self.part, self.of)

	def range(self, dt):
		return self.limits(dt)

	def update(self, dt, value):
		lo, hi = self.limits(dt)
		if not lo <= value <= hi:
			raise core.RangeError(self.part + ':' + str(self.of), value, lo, hi)
		try:
			return self.set(dt, value)
		except OverflowError as err:
			raise core.Overflow("date out of range: " + repr(dt)) from err

def _constant(lo, hi):
	return (lambda dt: (lo, hi))

def _with_day_clamped(dt, year, month):
	day = min(dt.day, calendar.monthrange(year, month)[1])
	return dt.replace(year=year, month=month, day=day)

def _set_hour(dt, hour):
	return replace_milli_of_day(dt, hour * 3600000 + time_milliseconds(dt) % 3600000)

def _define_fields():
	ms = time_milliseconds
	days = datetime.timedelta(days=1)

	yield Field('millisecond', 'day', _constant(0, constants.max_milli_of_day),
		ms, replace_milli_of_day)
	yield Field('millisecond', 'second', _constant(0, 999),
		(lambda dt: dt.microsecond // 1000),
		(lambda dt, v: dt.replace(microsecond=v * 1000)))
	yield Field('second', 'day', _constant(0, 86399),
		(lambda dt: ms(dt) // 1000),
		(lambda dt, v: replace_milli_of_day(dt, v * 1000 + ms(dt) % 1000)))
	yield Field('second', 'minute', _constant(0, 59),
		(lambda dt: dt.second),
		(lambda dt, v: dt.replace(second=v)))
	yield Field('minute', 'day', _constant(0, 1439),
		(lambda dt: ms(dt) // 60000),
		(lambda dt, v: replace_milli_of_day(dt, v * 60000 + ms(dt) % 60000)))
	yield Field('minute', 'hour', _constant(0, 59),
		(lambda dt: dt.minute),
		(lambda dt, v: dt.replace(minute=v)))
	yield Field('hour', 'day', _constant(0, 23),
		(lambda dt: dt.hour),
		_set_hour)
	yield Field('hour', 'meridiem', _constant(0, 11),
		(lambda dt: dt.hour % 12),
		(lambda dt, v: _set_hour(dt, (dt.hour // 12) * 12 + v)))
	yield Field('clockhour', 'day', _constant(1, 24),
		(lambda dt: dt.hour or 24),
		(lambda dt, v: _set_hour(dt, v % 24)))
	yield Field('clockhour', 'meridiem', _constant(1, 12),
		(lambda dt: (dt.hour % 12) or 12),
		(lambda dt, v: _set_hour(dt, (dt.hour // 12) * 12 + (v % 12))))
	yield Field('meridiem', 'day', _constant(0, 1),
		(lambda dt: 1 if dt.hour >= 12 else 0),
		(lambda dt, v: _set_hour(dt, (dt.hour % 12) + 12 * v)))

	yield Field('day', 'week', _constant(1, 7),
		(lambda dt: dt.isoweekday()),
		(lambda dt, v: dt + (v - dt.isoweekday()) * days))
	yield Field('day', 'month',
		(lambda dt: (1, calendar.monthrange(dt.year, dt.month)[1])),
		(lambda dt: dt.day),
		(lambda dt, v: dt.replace(day=v)))
	yield Field('day', 'year',
		(lambda dt: (1, 366 if calendar.isleap(dt.year) else 365)),
		(lambda dt: dt.timetuple().tm_yday),
		(lambda dt, v: dt + (v - dt.timetuple().tm_yday) * days))
	yield Field('day', 'epoch',
		_constant(
			datetime.date.min.toordinal() - constants.epoch_date.toordinal(),
			datetime.date.max.toordinal() - constants.epoch_date.toordinal(),
		),
		(lambda dt: dt.toordinal() - constants.epoch_date.toordinal()),
		(lambda dt, v: dt + (v - (dt.toordinal() - constants.epoch_date.toordinal())) * days))
	yield Field('month', 'year', _constant(1, 12),
		(lambda dt: dt.month),
		(lambda dt, v: _with_day_clamped(dt, dt.year, v)))
	yield Field('year', None, _constant(datetime.MINYEAR, datetime.MAXYEAR),
		(lambda dt: dt.year),
		(lambda dt, v: _with_day_clamped(dt, v, dt.month)))

	yield Field('second', 'epoch', _constant(constants.long_min, constants.long_max),
		(lambda dt: (dt - constants.unix_epoch) // one_second),
		(lambda dt, v: dt + (v - (dt - constants.unix_epoch) // one_second) * one_second))
	yield Field('offset', None, _constant(-18 * 3600, 18 * 3600),
		(lambda dt: dt.utcoffset() // one_second),
		(lambda dt, v: dt.replace(tzinfo=fixed_offset(v))))

fields = {x.key: x for x in _define_fields()}
