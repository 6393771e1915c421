"""
# The Internet Time point type.

# &InternetTime is a date and a centibeat of the day at a fixed offset from UTC in the
# proleptic gregorian calendar; `2025-12-28 @123.45`. Daylight saving time does not apply
# and the offset is not stored as it is implied by the type.

#!python
	it = InternetTime.of((2025, 12, 31), 234, 56)
	assert str(it) == "d31.12.2025 @234.56"
	assert it.elapse(beat=1).beat == 235

# Instances are immutable; field updates and arithmetic construct new instances.
# The precision of the type is a single centibeat: 864 milliseconds.

# [ Engineering ]
# Standard field updates and calendar arithmetic round trip through an aware
# &datetime.datetime and could operate on the components directly.
"""
import datetime
import typing

from . import core
from . import constants
from . import standard
from . import units
from . import fields

ZONE = constants.ZONE

def _shift_date(date, days:int) -> datetime.date:
	try:
		return date + datetime.timedelta(days=days)
	except OverflowError as err:
		raise core.Overflow("date out of range: %s%+d days" %(date, days)) from err

def _date(date) -> datetime.date:
	if date is None:
		raise core.MissingArgument('date')
	if isinstance(date, datetime.datetime):
		return date.date()
	if isinstance(date, datetime.date):
		return date

	try:
		return datetime.date(*date)
	except ValueError as err:
		raise core.RangeError('date', date) from err

def beat_millis(beat:int, centibeat:int) -> int:
	"""
	# Validate and convert a beat and centibeat of beat pair into the millisecond of the day.
	"""
	fields.BEAT_OF_DAY.check(beat)
	fields.CENTIBEAT_OF_BEAT.check(centibeat)
	return units.BEAT.to_millis(beat) + units.CENTIBEAT.to_millis(centibeat)

def normalize_date(date, offset_seconds, millis,
		reference=constants.reference_offset_seconds,
		day=constants.millis_per_day,
	):
	"""
	# Identify the date at the reference offset given the &date observed at
	# &offset_seconds and the reference offset's millisecond of the day, &millis.
	"""
	adjustment = (offset_seconds - reference) * 1000
	if adjustment == 0:
		return date

	local = millis + adjustment
	if local < 0:
		# Already the next day at the reference offset.
		return _shift_date(date, 1)
	elif local >= day:
		# Still the prior day at the reference offset.
		return _shift_date(date, -1)
	return date

def _time_of_millis(millis, tzinfo=None) -> datetime.time:
	seconds, ms = divmod(millis, 1000)
	minutes, second = divmod(seconds, 60)
	hour, minute = divmod(minutes, 60)
	return datetime.time(hour, minute, second, ms * 1000, tzinfo=tzinfo)

class InternetTime(tuple):
	"""
	# A global instant according to the Internet Time standard: a date with the
	# centibeat of the day at UTC+1.

	# Equality and ordering are defined by `(date, centibeat_of_day)`.
	"""
	__slots__ = ()

	zone = ZONE
	precision = units.CENTIBEAT

	def __new__(Class, date:datetime.date, centibeat:int):
		if not isinstance(date, datetime.date) or isinstance(date, datetime.datetime):
			raise core.UnsupportedTemporalType('date required, given ' + date.__class__.__name__)
		centibeat = fields.CENTIBEAT_OF_DAY.check(centibeat)
		return tuple.__new__(Class, (date, centibeat))

	def __getnewargs__(self):
		return tuple(self)

	# Factories

	@classmethod
	def now(Class, clock:typing.Callable[[], int]=None) -> 'InternetTime':
		"""
		# The current Internet Time.

		# [ Parameters ]
		# /clock/
			# Callable returning milliseconds since the unix epoch.
			# Defaults to &.sysclock.real_millis.
		"""
		if clock is None:
			from .sysclock import real_millis as clock
		return Class.of_epoch_millis(clock())

	@classmethod
	def of_epoch_millis(Class, millis:int,
			reference=constants.reference_offset_millis,
			day=constants.millis_per_day,
		) -> 'InternetTime':
		"""
		# Construct from milliseconds since the unix epoch.
		"""
		if millis is None:
			raise core.MissingArgument('millis')

		days, ms = divmod(millis + reference, day)
		return Class(_shift_date(constants.epoch_date, days), units.CENTIBEAT.from_millis(ms))

	@classmethod
	def of_instant(Class, instant:datetime.datetime) -> 'InternetTime':
		"""
		# Construct from an aware &datetime.datetime; the instant is re-expressed
		# at the reference offset.
		"""
		if instant is None:
			raise core.MissingArgument('instant')
		if instant.utcoffset() is None:
			raise core.IrreconcilableSource(instant)

		try:
			local = instant.astimezone(ZONE)
		except OverflowError as err:
			raise core.Overflow("instant out of range: " + repr(instant)) from err

		millis = standard.time_milliseconds(local)
		return Class(local.date(), units.CENTIBEAT.from_millis(millis))

	@classmethod
	def from_temporal(Class, temporal) -> 'InternetTime':
		"""
		# Derive an &InternetTime from &temporal.

		# Aware datetimes are re-expressed at the reference offset and
		# &.format.Parsed instances are resolved with &from_parsed.
		# Local dates, times, and datetimes have no offset and cannot be reconciled.
		"""
		if temporal is None:
			raise core.MissingArgument('temporal')
		if isinstance(temporal, InternetTime):
			return temporal
		if isinstance(temporal, datetime.datetime):
			return Class.of_instant(temporal)

		from .format import Parsed
		if isinstance(temporal, Parsed):
			return Class.from_parsed(temporal)

		try:
			dt = standard.to_datetime(temporal)
		except core.UnsupportedTemporalType as err:
			raise core.IrreconcilableSource(temporal) from err
		return Class.of_instant(dt)

	@classmethod
	def of(Class, date, beat:int, centibeat:int=0, offset=ZONE) -> 'InternetTime':
		"""
		# Construct from the date observed at &offset and the beat and centibeat of beat.

		# [ Parameters ]
		# /date/
			# A &datetime.date or a `(year, month, day)` tuple.
		# /beat/
			# The beat of the day, 0 - 999.
		# /centibeat/
			# The centibeat of the beat, 0 - 99.
		# /offset/
			# The offset that &date was observed at. A fixed &datetime.tzinfo,
			# &datetime.timedelta, or seconds. Defaults to the reference offset.
		"""
		if beat is None:
			raise core.MissingArgument('beat')
		if centibeat is None:
			raise core.MissingArgument('centibeat')

		date = _date(date)
		tz = standard.fixed_offset(offset)
		beat = fields.BEAT_OF_DAY.check(beat)
		centibeat = fields.CENTIBEAT_OF_BEAT.check(centibeat)
		millis = beat_millis(beat, centibeat)

		date = normalize_date(date, standard.offset_total_seconds(tz), millis)
		return Class(date, (beat * constants.centibeats_per_beat) + centibeat)

	@classmethod
	def from_parsed(Class, parsed) -> 'InternetTime':
		"""
		# Resolve the fields of &parsed into an &InternetTime.

		# The time of day is taken from the first available of: the centibeat of the day,
		# the beat of the day with the optional centibeat of the beat, the millisecond of
		# the day, or the seconds since the epoch with the optional nanosecond of the second.
		# Absent dates default to the unix epoch and absent offsets to the reference offset.
		"""
		if parsed is None:
			raise core.MissingArgument('parsed')

		get = parsed.get
		ymd = (get(('year', None)), get(('month', 'year')), get(('day', 'month')))
		if None not in ymd:
			date = _date(ymd)
		else:
			date = constants.epoch_date

		offset = get(('offset', None))
		if offset is None:
			offset = constants.reference_offset_seconds

		centibeats = get(fields.CENTIBEAT_OF_DAY)
		beat = get(fields.BEAT_OF_DAY)

		if centibeats is not None:
			centibeats = fields.CENTIBEAT_OF_DAY.check(centibeats)
		elif beat is not None:
			centibeats = fields.BEAT_OF_DAY.check(beat) * constants.centibeats_per_beat
			fraction = get(fields.CENTIBEAT_OF_BEAT)
			if fraction is not None:
				centibeats += fields.CENTIBEAT_OF_BEAT.check(fraction)
		elif ('millisecond', 'day') in parsed:
			local = (
				get(('millisecond', 'day')) -
				(offset * 1000) +
				constants.reference_offset_millis
			)
			days, millis = divmod(local, constants.millis_per_day)
			return Class(_shift_date(date, days), units.CENTIBEAT.from_millis(millis))
		elif ('second', 'epoch') in parsed:
			nanos = get(('nanosecond', 'second')) or 0
			return Class.of_epoch_millis((get(('second', 'epoch')) * 1000) + (nanos // 1000000))
		else:
			raise core.IrreconcilableSource(parsed)

		date = normalize_date(date, offset, units.CENTIBEAT.to_millis(centibeats))
		return Class(date, centibeats)

	@classmethod
	def parse(Class, text:str, formatter) -> 'InternetTime':
		"""
		# Parse &text using &formatter; see &.format.
		"""
		if formatter is None:
			raise core.MissingArgument('formatter')
		return formatter.parse(text, Class.from_parsed)

	def format(self, formatter) -> str:
		if formatter is None:
			raise core.MissingArgument('formatter')
		return formatter.format(self)

	# Comparisons are limited to InternetTime instances; plain tuples are never equal.

	def __eq__(self, other):
		return isinstance(other, InternetTime) and tuple.__eq__(self, other)

	def __ne__(self, other):
		return not self.__eq__(other)

	def _comparable(self, other, operator):
		if not isinstance(other, InternetTime):
			raise TypeError(
				"'%s' not supported between InternetTime and %s" %(operator, other.__class__.__name__)
			)
		return other

	def __lt__(self, other):
		return tuple.__lt__(self, self._comparable(other, '<'))

	def __le__(self, other):
		return tuple.__le__(self, self._comparable(other, '<='))

	def __gt__(self, other):
		return tuple.__gt__(self, self._comparable(other, '>'))

	def __ge__(self, other):
		return tuple.__ge__(self, self._comparable(other, '>='))

	__hash__ = tuple.__hash__

	def leads(self, pit) -> bool:
		"""
		# Whether the point, &self, comes *before* &pit.
		"""
		return self < pit

	def follows(self, pit) -> bool:
		"""
		# Whether the point, &self, comes *after* &pit.
		"""
		return self > pit

	def __str__(self):
		from .format import RETRO_DATE_CENTIBEATS
		return RETRO_DATE_CENTIBEATS.format(self)

	def __repr__(self):
		return "(inettime@'%s')" %(str(self),)

	# Components

	@property
	def date(self) -> datetime.date:
		return self[0]

	@property
	def centibeat_of_day(self) -> int:
		return self[1]

	@property
	def beat(self) -> int:
		return self[1] // constants.centibeats_per_beat

	@property
	def centibeat_of_beat(self) -> int:
		return self[1] % constants.centibeats_per_beat

	@property
	def millisecond_of_day(self) -> int:
		return units.CENTIBEAT.to_millis(self[1])

	@property
	def year(self) -> int:
		return self[0].year

	@property
	def month(self) -> int:
		return self[0].month

	@property
	def day(self) -> int:
		return self[0].day

	@property
	def day_of_year(self) -> int:
		return self[0].timetuple().tm_yday

	@property
	def weekday(self) -> int:
		"""
		# The ISO day of the week; Monday is 1 and Sunday is 7.
		"""
		return self[0].isoweekday()

	# Conversions

	def to_epoch_millis(self) -> int:
		days = self[0].toordinal() - constants.epoch_date.toordinal()
		return (days * constants.millis_per_day) + self.millisecond_of_day - constants.reference_offset_millis

	def to_datetime(self, tz:datetime.tzinfo=None) -> datetime.datetime:
		"""
		# The aware datetime at the reference offset, or at &tz when given.
		"""
		dt = datetime.datetime.combine(self[0], self.to_offset_time())
		if tz is not None:
			try:
				dt = dt.astimezone(tz)
			except OverflowError as err:
				raise core.Overflow("datetime out of range: " + repr(self)) from err
		return dt

	def to_instant(self) -> datetime.datetime:
		"""
		# The aware datetime in UTC.
		"""
		return self.to_datetime(standard.utc)

	def to_local_datetime(self) -> datetime.datetime:
		return datetime.datetime.combine(self[0], self.to_local_time())

	def to_date(self) -> datetime.date:
		return self[0]

	def to_local_time(self) -> datetime.time:
		return _time_of_millis(self.millisecond_of_day)

	def to_offset_time(self) -> datetime.time:
		return _time_of_millis(self.millisecond_of_day, ZONE)

	@staticmethod
	def time_of_beat(beat:int, centibeat:int=0) -> datetime.time:
		"""
		# The time at the reference offset of the given beat and centibeat of beat.
		"""
		return _time_of_millis(beat_millis(beat, centibeat), ZONE)

	def to_nearest_second(self) -> datetime.datetime:
		"""
		# The aware datetime at the reference offset rounded to the nearest second.
		# Remainders of 500 milliseconds, or more, round up.
		"""
		remainder = self.millisecond_of_day % 1000
		adjustment = (1000 - remainder) if remainder >= 500 else -remainder
		return standard.add_milliseconds(self.to_datetime(), adjustment)

	def truncate(self, field):
		"""
		# Align to the start of the &field's unit; see &.library.to_start_of.
		"""
		from .library import to_start_of
		return to_start_of(field, self)

	# Field and unit dispatch

	@staticmethod
	def _field(part, of):
		if part is None:
			raise core.MissingArgument('field')
		if isinstance(part, (fields.Field, standard.Field)):
			return part
		if isinstance(part, str):
			return fields.select(part, of) or standard.fields.get((part, of))
		# Foreign field implementations.
		return part

	@staticmethod
	def _unit(unit):
		if unit is None:
			raise core.MissingArgument('unit')
		if isinstance(unit, units.Unit):
			return unit
		if isinstance(unit, str):
			native = units.select(unit)
			if native is not None:
				return native
			if unit in standard.exact_units or unit in standard.calendar_units:
				return unit
			raise core.UnsupportedTemporalType("unsupported unit: " + unit)
		return unit

	def is_supported(self, subject, of=None) -> bool:
		"""
		# Whether the field or unit, &subject, is supported.

		# Strings identify units or, with &of, the `(part, of)` pair of a field.
		"""
		if subject is None:
			return False
		if isinstance(subject, (fields.Field, units.Unit, standard.Field)):
			return True

		if isinstance(subject, str):
			if of is None and (
				subject in units.units or
				subject in standard.exact_units or
				subject in standard.calendar_units
			):
				return True
			return fields.select(subject, of) is not None or (subject, of) in standard.fields

		return subject.is_supported_by(self)

	def range(self, field, of=None) -> typing.Tuple[int, int]:
		"""
		# The inclusive `(minimum, maximum)` pair of the &field.
		"""
		f = self._field(field, of)
		if isinstance(f, fields.Field):
			return f.range()
		if isinstance(f, standard.Field):
			return f.range(self.to_datetime())
		if f is None:
			raise core.UnsupportedTemporalType("unsupported field: %s of %s" %(field, of))
		return f.range_refined_by(self)

	def select(self, part, of=None) -> int:
		"""
		# Extract the value of the field identified by &part and &of.

		#!python
			beat = it.select('beat', 'day')
			fraction = it.select(fields.CENTIBEAT_OF_BEAT)
			hour = it.select('hour', 'day')
		"""
		f = self._field(part, of)

		if f is fields.BEAT_OF_DAY:
			return self.beat
		elif f is fields.CENTIBEAT_OF_DAY:
			return self.centibeat_of_day
		elif f is fields.CENTIBEAT_OF_BEAT:
			return self.centibeat_of_beat
		elif isinstance(f, standard.Field):
			return f.get(self.to_datetime())
		elif f is None:
			raise core.UnsupportedTemporalType("unsupported field: %s of %s" %(part, of))

		return f.get_from(self)

	get = select

	def update(self, part, replacement:int, of=None) -> 'InternetTime':
		"""
		# Construct a new instance with the identified field set to &replacement.
		# Standard time fields finer than a centibeat are floored to the centibeat.
		"""
		if replacement is None:
			raise core.MissingArgument('replacement')
		f = self._field(part, of)

		if isinstance(f, fields.Field):
			value = f.check(replacement)
			if f is fields.BEAT_OF_DAY:
				centibeats = value * constants.centibeats_per_beat
			elif f is fields.CENTIBEAT_OF_DAY:
				centibeats = value
			else:
				centibeats = self.centibeat_of_day - self.centibeat_of_beat + value
			return self.__class__(self[0], centibeats)
		elif isinstance(f, standard.Field):
			return self.of_instant(f.update(self.to_datetime(), replacement))
		elif f is None:
			raise core.UnsupportedTemporalType("unsupported field: %s of %s" %(part, of))

		return f.adjust_into(self, replacement)

	def _add_millis(self, millis:int) -> 'InternetTime':
		days, ms = divmod(self.millisecond_of_day + millis, constants.millis_per_day)
		return self.__class__(_shift_date(self[0], days), units.CENTIBEAT.from_millis(ms))

	def plus(self, amount:int, unit) -> 'InternetTime':
		"""
		# Construct a new instance &amount &unit later.
		"""
		u = self._unit(unit)
		if isinstance(u, units.Unit):
			return self._add_millis(u.to_millis(amount))
		elif isinstance(u, str):
			return self.of_instant(standard.elapse(self.to_datetime(), amount, u))

		return u.add_to(self, amount)

	def minus(self, amount:int, unit) -> 'InternetTime':
		return self.plus(-amount, unit)

	def elapse(self, **parts) -> 'InternetTime':
		"""
		# Construct a new instance adjusted by the given units:

		#!python
			later = it.elapse(beat=2, centibeat=50, day=1)
		"""
		pit = self
		for unit, amount in parts.items():
			pit = pit.plus(amount, unit)
		return pit

	def rollback(self, **parts) -> 'InternetTime':
		"""
		# The point in time that occurred the given number of units before this point.
		"""
		pit = self
		for unit, amount in parts.items():
			pit = pit.minus(amount, unit)
		return pit

	def until(self, end, unit) -> int:
		"""
		# The number of complete &unit from &self, inclusive, to &end, exclusive.

		# [ Parameters ]
		# /end/
			# An &InternetTime or an aware &datetime.datetime.
		# /unit/
			# A &units.Unit, a standard unit identifier, or a unit object implementing `between`.
		"""
		if end is None:
			raise core.MissingArgument('end')
		u = self._unit(unit)

		try:
			stop = standard.to_datetime(end)
		except core.UnsupportedTemporalType as err:
			raise core.IrreconcilableSource(end) from err

		if isinstance(u, str):
			return standard.measure(self.to_datetime(), stop, u)
		return u.between(self, stop)

# Participation in the generic temporal interface.
standard.to_datetime.register(InternetTime, InternetTime.to_datetime)
standard.add_milliseconds.register(InternetTime, InternetTime._add_millis)

@standard.milli_of_day.register(InternetTime)
def _milli_of_internet_time(it):
	return it.millisecond_of_day

@standard.offset_seconds.register(InternetTime)
def _offset_of_internet_time(it):
	return constants.reference_offset_seconds

@standard.replace_milli_of_day.register(InternetTime)
def _replace_internet_time_millis(it, millis):
	return it.update(fields.CENTIBEAT_OF_DAY, units.CENTIBEAT.from_millis(millis))

@standard.supports_milliseconds.register(InternetTime)
def _internet_time_milliseconds(it):
	return True

@standard.milliseconds_between.register(InternetTime)
def _internet_time_between(start, stop):
	return standard.milliseconds_between(start.to_datetime(), stop)
