"""
# System clock access in POSIX milliseconds.
"""
import time

def real_millis(time_ns=time.time_ns, divisor=1000000) -> int:
	"""
	# Snapshot of the system's real clock as milliseconds since the unix epoch.
	"""
	return time_ns() // divisor

def now():
	"""
	# Get the current point in time according to the system's real clock
	# as an &.types.InternetTime.
	"""
	from .types import InternetTime
	return InternetTime.of_epoch_millis(real_millis())
