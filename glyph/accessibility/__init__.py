"""Screen-reader announcements and accessibility tree management with pluggable backends."""