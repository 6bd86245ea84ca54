from bulletin.observer import RememberingObserver, ThreadSafeRememberingObserver
from bulletin.topic import Topic, TopicSubscriber
from bulletin.visualiser import display_subject_graph

if __name__ == '__main__':
    news = Topic('news')
    weather = Topic('weather')

    reader = TopicSubscriber('reader')
    reader.bind(news)
    news.register(reader)

    archiver = ThreadSafeRememberingObserver('archiver')
    archiver.bind(news)
    news.register(archiver)
    weather.register(archiver)

    weather.register(RememberingObserver('forecaster'))

    display_subject_graph([news, weather])
    archiver.stop()
