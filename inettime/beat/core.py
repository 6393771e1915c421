"""
# Exception hierarchy for Internet Time fields, units, points, and formats.

# The classes multiply inherit from the builtin exception that most closely
# matches the failure so that callers may trap either.
"""

class Error(Exception):
	"""
	# Base class for all Internet Time errors.
	"""

class MissingArgument(Error, TypeError):
	"""
	# A required argument was &None.
	"""

	def __init__(self, name):
		super().__init__(name + " must not be None")
		self.name = name

class UnsupportedTemporalType(Error, TypeError):
	"""
	# The temporal value does not provide the components needed by the field or unit;
	# usually, the millisecond of the day and the UTC offset.
	"""

class RangeError(Error, ValueError):
	"""
	# A value given to a field or constructor is outside of the field's range.

	# [ Properties ]
	# /field/
		# The name of the field whose range was violated.
	# /value/
		# The rejected value.
	"""

	def __init__(self, field, value, minimum=None, maximum=None):
		msg = "value out of range for " + str(field) + ": " + repr(value)
		if minimum is not None:
			msg += " (valid values %d - %d)" %(minimum, maximum)
		super().__init__(msg)
		self.field = field
		self.value = value

class IrreconcilableSource(Error, ValueError):
	"""
	# An Internet Time point could not be derived from the source.
	# Local dates and times have no offset to normalize against.
	"""

	def __init__(self, source):
		super().__init__(
			"cannot derive InternetTime from %s: %r" %(source.__class__.__name__, source)
		)
		self.source = source

class Overflow(Error, OverflowError):
	"""
	# Unit conversion or date arithmetic exceeded the representable range.
	"""

class FormatError(Error, ValueError):
	"""
	# A formatter could not be constructed or could not render a value.
	"""

class ParseError(FormatError):
	"""
	# The text could not be parsed by the formatter.

	# [ Properties ]
	# /source/
		# The text given to the parser.
	# /position/
		# The index into &source where parsing stopped.
	# /format/
		# The formatter that failed.
	"""

	def __init__(self, source, position=0, format=None):
		super().__init__("text %r could not be parsed at index %d" %(source, position))
		self.source = source
		self.position = position
		self.format = format
