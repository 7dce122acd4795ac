# wxcipher/router.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Topic router. Screens mark handler methods with @subscribe(topic);
# Router.register(screen) binds them, Router.publish(topic, payload)
# fans the payload out to every bound handler.

DEBUG = False

T_OBSERVATION = "wx/observation"

_SUBS = {}  # function qualname -> [topic, ...]


def _qualname_of(fn):
    qn = getattr(fn, "__qualname__", None)
    if qn:
        return qn
    return getattr(fn, "__name__", str(fn))


def subscribe(topic):
    """
    Decorator that marks a method as a subscriber for a topic.

    Stored by qualname ("ClassName.method") so register() can find it
    again from a live instance.
    """
    def deco(fn):
        _SUBS.setdefault(_qualname_of(fn), []).append(topic)
        if DEBUG:
            print("subscribe:", _qualname_of(fn), "->", topic)
        return fn
    return deco


class Router:
    def __init__(self):
        self._handlers = {}  # topic -> [callable(payload)]

    def clear(self):
        self._handlers = {}

    def register(self, obj):
        """Bind every @subscribe method on obj (its class and bases). Returns count."""
        n = 0
        seen = set()
        for klass in type(obj).__mro__:
            for name, attr in vars(klass).items():
                if name.startswith("_") or name in seen or not callable(attr):
                    continue
                # an override hides the base method, subscribed or not
                seen.add(name)
                qn = _qualname_of(attr)
                topics = _SUBS.get(qn)
                if not topics:
                    continue
                bound = getattr(obj, name)
                for topic in topics:
                    self._handlers.setdefault(topic, []).append(bound)
                    n += 1
                    if DEBUG:
                        print("  subscribed:", qn, "->", topic)
        return n

    def publish(self, topic, payload=None):
        handlers = self._handlers.get(topic)
        if DEBUG:
            print("Router.publish:", topic, "handlers=", 0 if not handlers else len(handlers))

        if not handlers:
            return 0
        for h in handlers:
            h(payload)
        return len(handlers)

    def topics(self):
        """Return an iterable of topic strings currently registered."""
        return self._handlers.keys()
