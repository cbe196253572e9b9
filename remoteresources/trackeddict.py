# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

`TrackedDict` is the mapping that holds a resource's attribute data.

Besides the data itself, a `TrackedDict` remembers which keys were changed
since its changes were last cleared, so that saving a resource need send only
what changed. Nested dictionaries are held as `TrackedDict` instances too, so
changes made deep inside a value are noticed as well.

"""

from collections.abc import Mapping, MutableMapping


class TrackedDict(MutableMapping):

    """A mutable mapping that records which of its keys were changed.

    >>> d = TrackedDict({'name': 'Molly'})
    >>> d.clear_changes()
    >>> d['name'] = 'Fred'
    >>> d.changes
    {'name': 'Fred'}

    """

    def __init__(self, data=None, **kwargs):
        self._data = {}
        self._changed = set()
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @staticmethod
    def track(value):
        # Mappings are copied so no two owners share one.
        if isinstance(value, Mapping):
            return TrackedDict(value)
        return value

    def __getitem__(self, key):
        return self._data[key]

    def __setitem__(self, key, value):
        value = self.track(value)
        if key in self._data and self._data[key] == value:
            return
        self._data[key] = value
        self._changed.add(key)

    def __delitem__(self, key):
        del self._data[key]
        self._changed.discard(key)

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if isinstance(other, TrackedDict):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._data)

    @property
    def changes(self):
        """A plain dictionary of the changed keys and their current values.

        A nested `TrackedDict` that was not itself replaced, but has changes
        of its own, is reported with only those changes.

        """
        changes = {}
        for key, value in self._data.items():
            if key in self._changed:
                changes[key] = plain(value)
            elif isinstance(value, TrackedDict) and value.changed():
                changes[key] = value.changes
        return changes

    def changed(self, key=None):
        """Returns whether the mapping (or, if `key` is given, that key of the
        mapping) has changes."""
        if key is not None:
            if key in self._changed:
                return True
            value = self._data.get(key)
            return isinstance(value, TrackedDict) and value.changed()
        return bool(self.changes)

    def clear_changes(self):
        """Forgets all recorded changes, including those of nested
        mappings."""
        self._changed.clear()
        for value in self._data.values():
            if isinstance(value, TrackedDict):
                value.clear_changes()

    def deep_update(self, other):
        """Merges the mapping `other` into this one.

        Values that are mappings on both sides are merged recursively rather
        than replaced, and keys missing from `other` are left alone.

        """
        for key, value in other.items():
            current = self._data.get(key)
            if isinstance(current, TrackedDict) and isinstance(value, Mapping):
                current.deep_update(value)
            else:
                self[key] = value

    def deep_merge(self, other):
        """Returns a new `TrackedDict` of this mapping's data deep-merged
        with the mapping `other`."""
        merged = TrackedDict(self.to_dict())
        merged.deep_update(other)
        return merged

    def to_dict(self):
        """Returns the mapping's data as plain (nested) dictionaries."""
        return plain(self)


def plain(value):
    if isinstance(value, TrackedDict):
        return dict((k, plain(v)) for k, v in value._data.items())
    if isinstance(value, Mapping):
        return dict((k, plain(v)) for k, v in value.items())
    if isinstance(value, list):
        return [plain(v) for v in value]
    return value
