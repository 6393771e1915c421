"""
# Format and parse Internet Time strings.

# Formatters are immutable sequences of steps constructed with a &Builder. Each step
# renders a part of a temporal into text and scans the same part back into a &Parsed
# mapping of field values. &.types.InternetTime.from_parsed resolves the mapping.

#!python
	from inettime.beat import format
	text = format.OFFSET_DATE_CENTIBEATS.format(it) # "2025-10-12+01:00 @000.00"
	it = format.OFFSET_DATE_CENTIBEATS.parse(text, InternetTime.from_parsed)

# The four beat styles are available through &beat_formatter:

# /`'short'`/
	# `234`
# /`'medium'`/
	# `@234`
# /`'long'`/
	# `234.67`; the centibeat fraction is optional when parsing.
# /`'full'`/
	# `@234.67`; the centibeat fraction is optional when parsing.

# Formatting can usually occur without error, but parsing can fail in a variety of
# ways. All failures are reported with &.core.ParseError; errors raised while resolving
# the parsed fields are referenced by the `__cause__` of the &.core.ParseError.
"""
import collections.abc
import datetime

from . import core
from . import constants
from . import fields
from . import standard
from .types import InternetTime

ascii_digits = frozenset('0123456789')

class Mismatch(Exception):
	"""
	# Signal that a step did not match the text at &position.
	"""

	def __init__(self, position):
		super().__init__(position)
		self.position = position

def scan_digits(text, position, count, digits=ascii_digits):
	"""
	# Read exactly &count ASCII digits from &text at &position.
	"""
	end = position + count
	chunk = text[position:end]
	if len(chunk) != count or not digits.issuperset(chunk):
		raise Mismatch(position)
	return int(chunk), end

def scan_literal(text, position, literal):
	if not text.startswith(literal, position):
		raise Mismatch(position)
	return position + len(literal)

def select(temporal, key):
	"""
	# Read the field identified by &key from &temporal.

	# [ Parameters ]
	# /key/
		# A &fields.Field or a `(part, of)` pair identifying a standard field.
	"""
	if isinstance(key, fields.Field):
		return key.get_from(temporal)
	if isinstance(temporal, InternetTime):
		return temporal.select(*key)
	if key in standard.fields and isinstance(temporal, datetime.date):
		return standard.fields[key].get(temporal)

	raise core.UnsupportedTemporalType(
		"%s of %s not supported by %s" %(key[0], key[1], temporal.__class__.__name__)
	)

def date_of(temporal):
	if isinstance(temporal, (InternetTime, datetime.date)):
		return temporal
	raise core.UnsupportedTemporalType("no date: " + temporal.__class__.__name__)

def time_of(temporal):
	if isinstance(temporal, InternetTime):
		return temporal.to_local_time()
	if isinstance(temporal, datetime.datetime):
		return temporal.time()
	if isinstance(temporal, datetime.time):
		return temporal
	raise core.UnsupportedTemporalType("no time of day: " + temporal.__class__.__name__)

class Step(object):
	"""
	# A part of a &Formatter.
	"""
	__slots__ = ()

	def render(self, temporal) -> str:
		"""
		# Construct the text of the step for &temporal.
		"""
		raise NotImplementedError

	def scan(self, text, position, values) -> int:
		"""
		# Read the step's text from &position storing the fields into &values.
		# Returns the position following the text or raises &Mismatch.
		"""
		raise NotImplementedError

class Literal(Step):
	__slots__ = ('text',)

	def __init__(self, text):
		self.text = text

	def __repr__(self):
		return repr(self.text)

	def render(self, temporal):
		return self.text

	def scan(self, text, position, values):
		return scan_literal(text, position, self.text)

class Value(Step):
	"""
	# A zero padded, fixed width, field value.
	"""
	__slots__ = ('key', 'width')

	def __init__(self, key, width):
		self.key = key
		self.width = width

	def __repr__(self):
		if isinstance(self.key, fields.Field):
			name = self.key.name
		else:
			name = '%s:%s' %self.key
		return '{%s:%d}' %(name, self.width)

	def render(self, temporal):
		return '%0*d' %(self.width, select(temporal, self.key))

	def scan(self, text, position, values):
		values[self.key], position = scan_digits(text, position, self.width)
		return position

class Optional(Step):
	"""
	# A section that is omitted when the temporal cannot provide it,
	# and skipped when it does not match the text.
	"""
	__slots__ = ('formatter',)

	def __init__(self, formatter):
		self.formatter = formatter

	def __repr__(self):
		return '[' + ''.join(map(repr, self.formatter)) + ']'

	def render(self, temporal):
		try:
			return self.formatter.render(temporal)
		except core.UnsupportedTemporalType:
			return ''

	def scan(self, text, position, values):
		snapshot = dict(values)
		try:
			return self.formatter.scan(text, position, values)
		except Mismatch:
			values.clear()
			values.update(snapshot)
			return position

class Offset(Step):
	"""
	# The UTC offset; `Z` or `+HH:MM`, with seconds when they are not zero.
	"""
	__slots__ = ()
	key = ('offset', None)

	def __repr__(self):
		return '{offset}'

	def render(self, temporal):
		seconds = standard.offset_seconds(temporal)
		if seconds is None:
			raise core.UnsupportedTemporalType("no offset: " + temporal.__class__.__name__)
		if seconds == 0:
			return 'Z'

		sign = '-' if seconds < 0 else '+'
		minutes, second = divmod(abs(seconds), 60)
		hour, minute = divmod(minutes, 60)
		if second:
			return '%s%02d:%02d:%02d' %(sign, hour, minute, second)
		return '%s%02d:%02d' %(sign, hour, minute)

	def scan(self, text, position, values):
		if text.startswith('Z', position):
			values[self.key] = 0
			return position + 1

		sign = text[position:position+1]
		if sign not in ('+', '-'):
			raise Mismatch(position)
		hour, position = scan_digits(text, position + 1, 2)
		position = scan_literal(text, position, ':')
		minute, position = scan_digits(text, position, 2)

		second = 0
		if text.startswith(':', position):
			second, position = scan_digits(text, position + 1, 2)

		if hour > 18 or minute > 59 or second > 59:
			raise Mismatch(position)
		seconds = (hour * 3600) + (minute * 60) + second
		values[self.key] = -seconds if sign == '-' else seconds
		return position

class Date(Step):
	"""
	# The ISO-8601 calendar date; `YYYY-MM-DD`.
	"""
	__slots__ = ()
	keys = (('year', None), ('month', 'year'), ('day', 'month'))

	def __repr__(self):
		return '{date}'

	def render(self, temporal):
		d = date_of(temporal)
		return '%04d-%02d-%02d' %(d.year, d.month, d.day)

	def scan(self, text, position, values):
		year, position = scan_digits(text, position, 4)
		position = scan_literal(text, position, '-')
		month, position = scan_digits(text, position, 2)
		position = scan_literal(text, position, '-')
		day, position = scan_digits(text, position, 2)

		values.update(zip(self.keys, (year, month, day)))
		return position

class Time(Step):
	"""
	# The ISO-8601 local time; `HH:MM[:SS[.fraction]]`.
	# Rendering always includes the seconds and omits a zero fraction.
	"""
	__slots__ = ()

	def __repr__(self):
		return '{time}'

	def render(self, temporal):
		t = time_of(temporal)
		text = '%02d:%02d:%02d' %(t.hour, t.minute, t.second)
		if t.microsecond:
			text += '.' + ('%06d' %(t.microsecond,)).rstrip('0')
		return text

	def scan(self, text, position, values):
		hour, position = scan_digits(text, position, 2)
		position = scan_literal(text, position, ':')
		minute, position = scan_digits(text, position, 2)

		second = nanos = 0
		if text.startswith(':', position):
			second, position = scan_digits(text, position + 1, 2)

			if text.startswith('.', position):
				start = position + 1
				end = start
				while end < len(text) and end - start < 9 and text[end] in ascii_digits:
					end += 1
				if end == start:
					raise Mismatch(start)
				nanos = int(text[start:end].ljust(9, '0'))
				position = end

		if hour > 23 or minute > 59 or second > 59:
			raise Mismatch(position)

		values[('millisecond', 'day')] = (
			((((hour * 60) + minute) * 60 + second) * 1000) + (nanos // 1000000)
		)
		values[('nanosecond', 'second')] = nanos
		return position

class Instant(Step):
	"""
	# An instant in UTC; `YYYY-MM-DDTHH:MM:SS[.fraction]Z`.
	# Parsing accepts any offset and produces the seconds since the epoch.
	"""
	__slots__ = ()

	def __repr__(self):
		return '{instant}'

	def render(self, temporal):
		dt = standard.to_datetime(temporal).astimezone(standard.utc)
		return DATE.render(dt) + 'T' + TIME.render(dt) + 'Z'

	def scan(self, text, position, values):
		parts = {}
		position = DATE.scan(text, position, parts)
		position = scan_literal(text, position, 'T')
		position = TIME.scan(text, position, parts)
		position = OFFSET.scan(text, position, parts)

		try:
			date = datetime.date(*(parts[k] for k in Date.keys))
		except ValueError:
			raise Mismatch(position)

		days = date.toordinal() - constants.epoch_date.toordinal()
		seconds = parts[('millisecond', 'day')] // 1000
		values[('second', 'epoch')] = (days * 86400) + seconds - parts[Offset.key]
		values[('nanosecond', 'second')] = parts[('nanosecond', 'second')]
		return position

DATE = Date()
TIME = Time()
OFFSET = Offset()
INSTANT = Instant()

class Parsed(collections.abc.Mapping):
	"""
	# Read-only mapping of the field values scanned from &source.

	# Keys are &fields.Field instances and `(part, of)` pairs naming standard fields.
	"""
	__slots__ = ('source', '_values')

	def __init__(self, source, values):
		self.source = source
		self._values = dict(values)

	def __repr__(self):
		return "%s(%r, %r)" %(self.__class__.__name__, self.source, self._values)

	def __getitem__(self, key):
		return self._values[key]

	def __iter__(self):
		return iter(self._values)

	def __len__(self):
		return len(self._values)

class Formatter(tuple):
	"""
	# Immutable sequence of &Step instances that renders and scans text.
	"""
	__slots__ = ()

	def __repr__(self):
		return '<Formatter ' + ''.join(map(repr, self)) + '>'

	def render(self, temporal) -> str:
		return ''.join(step.render(temporal) for step in self)

	def scan(self, text, position, values) -> int:
		for step in self:
			position = step.scan(text, position, values)
		return position

	def format(self, temporal) -> str:
		"""
		# Render &temporal into text.

		# [ Parameters ]
		# /temporal/
			# An &InternetTime or a standard temporal providing the fields
			# used by the formatter.
		"""
		if temporal is None:
			raise core.MissingArgument('temporal')
		return self.render(temporal)

	def parse(self, text:str, query=None):
		"""
		# Parse the whole of &text into a &Parsed instance, or, when &query is given,
		# the result of `query(parsed)`.

		# [ Parameters ]
		# /query/
			# Callable resolving the &Parsed fields; often &InternetTime.from_parsed.
		"""
		if text is None:
			raise core.MissingArgument('text')

		values = {}
		try:
			position = self.scan(text, 0, values)
		except Mismatch as mismatch:
			raise core.ParseError(text, mismatch.position, self) from None

		if position != len(text):
			raise core.ParseError(text, position, self)

		parsed = Parsed(text, values)
		if query is None:
			return parsed

		try:
			return query(parsed)
		except core.ParseError:
			raise
		except Exception as e:
			parse_error = core.ParseError(text, position, self)
			parse_error.__cause__ = e
			raise parse_error

class Builder(object):
	"""
	# Accumulate steps for a &Formatter.

	#!python
		Builder().date().literal(' ').append(beat_formatter('full')).formatter()
	"""

	def __init__(self):
		self.steps = []

	def literal(self, text:str):
		self.steps.append(Literal(text))
		return self

	def value(self, key, width:int):
		"""
		# Add a zero padded field value of exactly &width digits.
		"""
		self.steps.append(Value(key, width))
		return self

	def offset(self):
		self.steps.append(OFFSET)
		return self

	def date(self):
		self.steps.append(DATE)
		return self

	def time(self):
		self.steps.append(TIME)
		return self

	def instant(self):
		self.steps.append(INSTANT)
		return self

	def optional(self, formatter):
		"""
		# Add &formatter as an optional section.
		"""
		if isinstance(formatter, Builder):
			formatter = formatter.formatter()
		self.steps.append(Optional(formatter))
		return self

	def append(self, formatter):
		self.steps.extend(formatter)
		return self

	def formatter(self) -> Formatter:
		return Formatter(self.steps)

def _beats():
	return Builder().value(fields.BEAT_OF_DAY, 3)

def _centibeats():
	return _beats().optional(
		Builder().literal('.').value(fields.CENTIBEAT_OF_BEAT, 2)
	)

constructors = {
	'short': (lambda: _beats().formatter()),
	'medium': (lambda: Builder().literal('@').append(_beats().formatter()).formatter()),
	'long': (lambda: _centibeats().formatter()),
	'full': (lambda: Builder().literal('@').append(_centibeats().formatter()).formatter()),
}

styles = ('short', 'medium', 'long', 'full')
_cache = [None] * len(styles)

def beat_formatter(style:str) -> Formatter:
	"""
	# Retrieve the formatter of the beat &style; one of &styles.
	# Formatters are constructed on first use.
	"""
	if style is None:
		raise core.MissingArgument('style')
	try:
		index = styles.index(style)
	except ValueError:
		raise core.FormatError("unknown beat style: %r" %(style,))

	f = _cache[index]
	if f is None:
		_cache[index] = constructors[style]()
		f = _cache[index]
	return f

LOCAL_DATE_BEATS = Builder().date().literal(' ').append(beat_formatter('medium')).formatter()
LOCAL_DATE_CENTIBEATS = Builder().date().literal(' ').append(beat_formatter('full')).formatter()
OFFSET_DATE_BEATS = Builder().date().offset().literal(' ').append(beat_formatter('medium')).formatter()
OFFSET_DATE_CENTIBEATS = Builder().date().offset().literal(' ').append(beat_formatter('full')).formatter()

RETRO_DATE_CENTIBEATS = (
	Builder()
	.optional(Builder().literal('d'))
	.value(('day', 'month'), 2).literal('.')
	.value(('month', 'year'), 2).literal('.')
	.value(('year', None), 4)
	.literal(' ')
	.append(beat_formatter('full'))
	.formatter()
)

ISO_LOCAL_DATE = Builder().date().formatter()
ISO_OFFSET_DATE = Builder().date().offset().formatter()
ISO_LOCAL_TIME = Builder().time().formatter()
ISO_OFFSET_TIME = Builder().time().offset().formatter()
ISO_LOCAL_DATE_TIME = Builder().date().literal('T').time().formatter()
ISO_OFFSET_DATE_TIME = Builder().date().literal('T').time().offset().formatter()
ISO_INSTANT = Builder().instant().formatter()
