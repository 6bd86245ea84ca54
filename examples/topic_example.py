from bulletin.config import configure_logging
from bulletin.topic import Topic, TopicSubscriber


if __name__ == '__main__':
    configure_logging()

    # create subject
    topic = Topic('Random Message')

    # create observers
    ob1 = TopicSubscriber('Observer 1')
    ob2 = TopicSubscriber('Observer 2')
    ob3 = TopicSubscriber('Observer 3')

    # register observers to the subject
    topic.register(ob1)
    topic.register(ob2)
    topic.register(ob3)

    # attach observers to subject
    ob1.bind(topic)
    ob2.bind(topic)
    ob3.bind(topic)

    # check if any update is available
    ob1.notify()

    # now send message to subject
    topic.post_message('New Message 1')

    # check if any update is available
    ob2.notify()

    # unregister an observer
    topic.unregister(ob2)

    topic.post_message('New Message 2')
