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

Sideloading resolves related resources that the API returned alongside the
requested ones, as when a ticket is requested with ``include=users``.

"""

import logging


log = logging.getLogger('remoteresources.sideloading')


def set_includes(resources, includes, body):
    """Fills the associations named in `includes` on `resources` (a resource
    or a list of them) from the records at the same names in the response
    `body`.

    Records are matched to a resource by the resource's id attribute(s) for
    the association, or failing that by the records' reference back to the
    resource (``<singular_resource_name>_id``). Includes that name no
    association of the resources' class are skipped.

    """
    if not includes:
        return
    if not isinstance(resources, (list, tuple)):
        resources = [resources]
    if not resources:
        return

    cls = type(resources[0])
    for name in includes:
        descriptor = cls.association_named(name)
        if descriptor is None:
            log.warning('%s has no association %r to sideload', cls.__name__,
                name)
            continue

        side_loads = body.get(name)
        if side_loads is None:
            side_loads = body.get(descriptor.api_name)
        if not isinstance(side_loads, list):
            continue

        for resource in resources:
            side_load(resource, descriptor, side_loads)


def side_load(resource, descriptor, side_loads):
    back_key = '%s_id' % type(resource).singular_resource_name
    own_id = resource.get('id')

    if descriptor.collection:
        ids = resource.get(descriptor.id_key)
        if isinstance(ids, (list, tuple)):
            found = [d for d in side_loads if d.get('id') in ids]
        elif own_id is not None:
            found = [d for d in side_loads if d.get(back_key) == own_id]
        else:
            return
        descriptor.load(resource, found)
        return

    related_id = resource.get(descriptor.id_key)
    for data in side_loads:
        if related_id is not None:
            if data.get('id') == related_id:
                break
        elif own_id is not None and data.get(back_key) == own_id:
            break
    else:
        return
    descriptor.load(resource, data)
