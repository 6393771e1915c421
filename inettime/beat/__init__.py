"""
[ About ]
---------

Internet Time points based on the standard library's &datetime.

Internet Time divides the day into one thousand beats of 86.4 seconds; each beat
is divided into one hundred centibeats of 864 milliseconds. The day is measured at
a fixed offset of UTC+1, Biel Mean Time, and has no time zones or daylight saving time.

&.library will be referred to as `libbeat` throughout the examples in this documentation.

#!/pl/python
	from inettime.beat import library as libbeat

Current Internet Time as a &.types.InternetTime:

#!/pl/python
	now = libbeat.now()
	print(now) # d12.10.2025 @234.56

[ Standard Types ]
------------------

The fields of &.fields read beats from aware &datetime.datetime instances, and
&.types.InternetTime converts to and from them:

#!/pl/python
	import datetime
	dt = datetime.datetime(2025, 10, 11, 15, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=-8)))
	assert libbeat.BEAT_OF_DAY.get_from(dt) == 0
	assert libbeat.InternetTime.of_instant(dt).to_datetime() == dt

[ Formatting ]
--------------

&.format provides the beat styles and date compositions:

#!/pl/python
	libbeat.format.beat_formatter('full').format(now) # @234.56
	libbeat.parse("2025-10-12+01:00 @234.56")
"""
