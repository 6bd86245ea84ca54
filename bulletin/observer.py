'''
A thread safe module implementing the observer pattern
https://en.wikipedia.org/wiki/Observer_pattern

The subject pushes a bare "you have an update" signal, observers pull the
state themselves.
'''

import logging
import weakref
from queue import Queue
from threading import Lock, Thread

from bulletin.exceptions import InvalidArgument, PreconditionViolation

logger = logging.getLogger(__name__)


class Subject(object):

    def __init__(self, name=None):
        self.name = name
        self._observers = []
        self._changed = False
        self._lock = Lock()

    def __repr__(self):
        class_name = self.__class__.__name__
        if self.name:
            return '<%s name="%s">' % (class_name, self.name)
        else:
            return '<%s>' % class_name

    @property
    def observers(self):
        with self._lock:
            return tuple(self._observers)

    def register(self, observer):
        if observer is None:
            raise InvalidArgument('Null Observer')

        with self._lock:
            if not self._contains(observer):
                self._observers.append(observer)
                logger.debug('%s registered %s', self, observer)

    def unregister(self, observer):
        with self._lock:
            for i, obs in enumerate(self._observers):
                if obs is observer:
                    del self._observers[i]
                    logger.debug('%s unregistered %s', self, observer)
                    return

    def set_changed(self):
        with self._lock:
            self._changed = True

    def has_changed(self):
        with self._lock:
            return self._changed

    def notify_observers(self):
        """ Signal every observer registered when the change was picked up

        Returns a list of (observer, exception) pairs for observers whose
        notify raised. A failing observer does not stop the rest of the pass.
        """

        # Anything registered after the snapshot waits for the next change
        with self._lock:
            if not self._changed:
                return []
            snapshot = tuple(self._observers)
            self._changed = False

        logger.debug('%s notifying %i observers', self, len(snapshot))

        failures = []
        for obs in snapshot:
            try:
                obs.notify()
            except Exception as e:
                logger.exception('%s failed to notify %s', self, obs)
                failures.append((obs, e))
        return failures

    def get_current_state(self):
        raise NotImplementedError()

    def _contains(self, observer):
        return any(obs is observer for obs in self._observers)


class Observer(object):

    def __init__(self, name=None):
        self.name = name
        self._subject_ref = None

    def __repr__(self):
        class_name = self.__class__.__name__
        if self.name:
            return '<%s name="%s">' % (class_name, self.name)
        else:
            return '<%s>' % class_name

    @property
    def subject(self):
        if self._subject_ref is None:
            return None
        return self._subject_ref()

    def bind(self, subject):
        # None unbinds
        if subject is None:
            self._subject_ref = None
        else:
            self._subject_ref = weakref.ref(subject)

    def pull(self):
        subject = self.subject
        if subject is None:
            raise PreconditionViolation('%s is not bound to a subject' % self)
        return subject.get_current_state()

    def notify(self):
        raise NotImplementedError()


class RememberingObserver(Observer):

    def __init__(self, name=None):
        super(RememberingObserver, self).__init__(name=name)
        self.calls = []

    def notify(self):
        self.calls.append(self.pull())


class ThreadSafeRememberingObserver(Observer):
    """ Hands each signal to a worker thread, which does the pull

    The state is read when the worker gets to it, so several quick updates
    can show up as repeats of the latest one.
    """

    def __init__(self, name=None):
        super(ThreadSafeRememberingObserver, self).__init__(name=name)
        self.calls = []
        self.q = Queue()
        self.worker = Thread(target=self._worker, daemon=True)
        self.worker.start()

    def notify(self):
        self.q.put(True)

    def join(self):
        self.q.join()

    def stop(self):
        self.q.put(None)
        self.worker.join()

    def _worker(self):
        while True:
            item = self.q.get()
            try:
                if item is None:
                    return
                self.calls.append(self.pull())
            except Exception:
                logger.exception('%s dropped a notification', self)
            finally:
                self.q.task_done()


if __name__ == '__main__':
    class Counter(Subject):
        def __init__(self):
            super(Counter, self).__init__(name='counter')
            self.count = 0

        def increment(self):
            self.count += 1
            self.set_changed()
            self.notify_observers()

        def get_current_state(self):
            return self.count

    counter = Counter()
    observer = RememberingObserver()
    observer.bind(counter)

    counter.register(observer)

    counter.increment()
    counter.increment()

    print(observer.calls)
