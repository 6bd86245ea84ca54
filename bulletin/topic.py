import logging

from bulletin.config import DEFAULT_TOPIC_NAME
from bulletin.observer import Observer, Subject

logger = logging.getLogger(__name__)


class Topic(Subject):
    """ A named subject whose observable state is the last posted message """

    def __init__(self, name=DEFAULT_TOPIC_NAME, output=print):
        super(Topic, self).__init__(name=name)
        self._message = None
        self.output = output

    def get_current_state(self):
        with self._lock:
            return self._message

    def post_message(self, msg):
        with self._lock:
            self._message = msg
            self._changed = True

        logger.info('Message posted to %s', self)
        if self.output:
            self.output('Message Posted to Topic <%s> : %s' % (self.name, msg))

        return self.notify_observers()


class TopicSubscriber(Observer):

    def __init__(self, name, output=print):
        super(TopicSubscriber, self).__init__(name=name)
        self.output = output
        self.observations = []
        self.consumed = []

    def notify(self):
        msg = self.pull()
        if msg is None:
            line = '%s :: No new message' % self.name
        else:
            line = '%s :: Consuming message :: %s' % (self.name, msg)
            self.consumed.append(msg)

        self.observations.append(line)
        if self.output:
            self.output(line)


if __name__ == '__main__':
    topic = Topic()
    subscriber = TopicSubscriber('Observer 1')

    topic.register(subscriber)
    subscriber.bind(topic)

    subscriber.notify()
    topic.post_message('Hello')
