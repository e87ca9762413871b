"""Walk a string with scan, scan_until and the match register."""

from strscanner import Scanner

s = Scanner("Timestamp: Fri Dec 12 1975 14:39")
s.scan_until(": ")
s.scan(r"(?P<day>\w+) (?P<month>\w+) (?P<date>\d+) ")
print(s.named_captures())
print(s.pre_match(), "|", s.post_match())
