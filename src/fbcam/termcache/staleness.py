# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

import time


class StalenessProbe(object):
    """Keeps track of whether a resource has changed since it was loaded.

    The probe does not read anything by itself. It decides when a new
    check is due (at most once per refresh interval) and compares the
    snapshots it is given against the one that was last loaded.
    """

    def __init__(self, refresh_interval, clock=time.monotonic):
        """Creates a new instance.

        :param refresh_interval: the minimal number of seconds between
            two checks; 0 or less means checking every time
        :param clock: a function returning the current time in seconds
        """

        self._interval = refresh_interval
        self._clock = clock
        self._last_check = None
        self._previous = None

    @property
    def previous(self):
        """The snapshot recorded at the last successful load."""

        return self._previous

    def due(self):
        """Indicates whether the resource should be checked now."""

        if self._last_check is None or self._interval <= 0:
            return True
        return self._clock() - self._last_check >= self._interval

    def checked(self):
        """Records that a check has just been made."""

        self._last_check = self._clock()

    def is_modified(self, snapshot):
        """Indicates whether a snapshot differs from the loaded one."""

        if self._previous is None:
            return True
        return snapshot.fingerprint != self._previous.fingerprint

    def record(self, snapshot):
        """Records the snapshot that has just been loaded."""

        self._previous = snapshot
