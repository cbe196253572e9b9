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

import unittest

from remoteresources.trackeddict import TrackedDict
from tests import utils


class TestTrackedDict(unittest.TestCase):

    def test_new_data_is_changed(self):
        d = TrackedDict({'name': 'Molly', 'value': 80})
        self.assertTrue(d.changed())
        self.assertEqual(d.changes, {'name': 'Molly', 'value': 80})

    def test_clear_changes(self):
        d = TrackedDict({'name': 'Molly', 'extra': {'color': 'blue'}})
        d.clear_changes()
        self.assertFalse(d.changed())
        self.assertEqual(d.changes, {})
        self.assertEqual(d, {'name': 'Molly', 'extra': {'color': 'blue'}})

    def test_set_records_change(self):
        d = TrackedDict({'name': 'Molly', 'value': 80})
        d.clear_changes()

        d['name'] = 'Fred'
        self.assertEqual(d.changes, {'name': 'Fred'})
        self.assertTrue(d.changed('name'))
        self.assertFalse(d.changed('value'))

    def test_set_same_value_is_not_a_change(self):
        d = TrackedDict({'name': 'Molly', 'extra': {'color': 'blue'}})
        d.clear_changes()

        d['name'] = 'Molly'
        d['extra'] = {'color': 'blue'}
        self.assertFalse(d.changed())

    def test_nested_change(self):
        d = TrackedDict({'name': 'Molly', 'extra': {'color': 'blue', 'size': 2}})
        d.clear_changes()

        d['extra']['color'] = 'red'
        self.assertTrue(d.changed())
        self.assertTrue(d.changed('extra'))
        self.assertEqual(d.changes, {'extra': {'color': 'red'}})

        d.clear_changes()
        self.assertEqual(d.changes, {})

    def test_replaced_nested_value_is_sent_whole(self):
        d = TrackedDict({'extra': {'color': 'blue'}})
        d.clear_changes()

        d['extra'] = {'color': 'red', 'size': 3}
        self.assertEqual(d.changes, {'extra': {'color': 'red', 'size': 3}})
        self.assertIsInstance(d['extra'], TrackedDict)
        self.assertIs(type(d.changes['extra']), dict)

    def test_mappings_are_copied(self):
        inner = {'color': 'blue'}
        d = TrackedDict({'extra': inner})
        d['extra']['color'] = 'red'
        self.assertEqual(inner, {'color': 'blue'})

        other = TrackedDict()
        other['extra'] = d['extra']
        other['extra']['color'] = 'green'
        self.assertEqual(d['extra']['color'], 'red')

    def test_delete(self):
        d = TrackedDict({'name': 'Molly'})
        del d['name']
        self.assertNotIn('name', d)
        self.assertEqual(d.changes, {})
        self.assertRaises(KeyError, lambda: d['name'])

    def test_update_and_setdefault(self):
        d = TrackedDict()
        d.update({'a': 1}, b=2)
        d.setdefault('c', 3)
        self.assertEqual(d.changes, {'a': 1, 'b': 2, 'c': 3})
        self.assertEqual(len(d), 3)
        self.assertEqual(sorted(d), ['a', 'b', 'c'])

    def test_deep_update(self):
        d = TrackedDict({'a': {'x': 1}})
        d.deep_update({'a': {'y': 2}})
        self.assertEqual(d.to_dict(), {'a': {'x': 1, 'y': 2}})

    def test_deep_update_keeps_local_keys(self):
        d = TrackedDict({'name': 'Molly', 'local': True,
            'extra': {'color': 'blue', 'size': 2}})
        d.deep_update({'name': 'Fred', 'extra': {'color': 'red'}, 'id': 7})
        self.assertEqual(d.to_dict(), {
            'name': 'Fred',
            'local': True,
            'id': 7,
            'extra': {'color': 'red', 'size': 2},
        })

    def test_deep_update_replaces_non_mappings(self):
        d = TrackedDict({'tags': ['a', 'b'], 'extra': 'none'})
        d.deep_update({'tags': ['c'], 'extra': {'color': 'red'}})
        self.assertEqual(d.to_dict(), {'tags': ['c'], 'extra': {'color': 'red'}})

    def test_deep_merge(self):
        d = TrackedDict({'a': {'x': 1}})
        merged = d.deep_merge({'a': {'y': 2}})
        self.assertEqual(merged.to_dict(), {'a': {'x': 1, 'y': 2}})
        # The original is left alone.
        self.assertEqual(d.to_dict(), {'a': {'x': 1}})

    def test_to_dict_is_plain(self):
        d = TrackedDict({'extra': {'colors': [{'name': 'blue'}]}})
        data = d.to_dict()
        self.assertIs(type(data['extra']), dict)
        data['extra']['colors'].append('red')
        self.assertEqual(d['extra']['colors'], [{'name': 'blue'}])


if __name__ == '__main__':
    utils.log()
    unittest.main()
