from threading import Thread

from bulletin.config import configure_logging
from bulletin.observer import ThreadSafeRememberingObserver
from bulletin.topic import Topic

if __name__ == '__main__':
    configure_logging()

    topic = Topic(output=None)

    obs = ThreadSafeRememberingObserver('worker')
    obs.bind(topic)
    topic.register(obs)

    posters = [Thread(target=topic.post_message, args=('Message %i' % i,)) for i in range(10)]
    for t in posters:
        t.start()
    for t in posters:
        t.join()

    obs.join()
    obs.stop()

    # Fewer than 10 entries is fine, updates can be coalesced
    print(obs.calls)
