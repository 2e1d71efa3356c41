import threading
import time

import pytest

from todo_api.locks import ReadWriteLock

TIMEOUT = 5


class TestReadWriteLock:
    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(3, timeout=TIMEOUT)

        def reader():
            with lock.read_locked():
                # Every reader must be inside at once for the barrier to trip
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for th in threads:
            th.start()
        for th in threads:
            th.join(TIMEOUT)

        assert not inside.broken
        assert lock.readers == 0

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        reader_done = threading.Event()

        def reader():
            with lock.read_locked():
                reader_done.set()

        with lock.write_locked():
            assert lock.write_held
            th = threading.Thread(target=reader)
            th.start()
            assert not reader_done.wait(0.2)

        assert reader_done.wait(TIMEOUT)
        th.join(TIMEOUT)
        assert not lock.write_held

    def test_reader_excludes_writer(self):
        lock = ReadWriteLock()
        writer_done = threading.Event()

        def writer():
            with lock.write_locked():
                writer_done.set()

        with lock.read_locked():
            th = threading.Thread(target=writer)
            th.start()
            assert not writer_done.wait(0.2)

        assert writer_done.wait(TIMEOUT)
        th.join(TIMEOUT)

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []
        writer_done = threading.Event()
        second_reader_done = threading.Event()

        def writer():
            with lock.write_locked():
                order.append("writer")
            writer_done.set()

        def second_reader():
            with lock.read_locked():
                order.append("reader")
            second_reader_done.set()

        lock.acquire_read()
        w = threading.Thread(target=writer)
        w.start()
        # Wait until the writer has registered itself as waiting
        for _ in range(100):
            if lock._writers_waiting:
                break
            time.sleep(0.01)
        r = threading.Thread(target=second_reader)
        r.start()
        assert not second_reader_done.wait(0.2)
        lock.release_read()

        assert writer_done.wait(TIMEOUT)
        assert second_reader_done.wait(TIMEOUT)
        w.join(TIMEOUT)
        r.join(TIMEOUT)
        assert order == ["writer", "reader"]

    def test_writers_are_serialized(self):
        lock = ReadWriteLock()
        counter = {"value": 0}

        def bump():
            for _ in range(1000):
                with lock.write_locked():
                    current = counter["value"]
                    counter["value"] = current + 1

        threads = [threading.Thread(target=bump) for _ in range(4)]
        for th in threads:
            th.start()
        for th in threads:
            th.join(TIMEOUT)

        assert counter["value"] == 4000

    def test_lock_released_when_block_raises(self):
        lock = ReadWriteLock()
        with pytest.raises(KeyError):
            with lock.write_locked():
                raise KeyError("boom")
        assert not lock.write_held
        with pytest.raises(KeyError):
            with lock.read_locked():
                raise KeyError("boom")
        assert lock.readers == 0

    def test_release_without_acquire(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_interrupted_writer_wakes_queued_readers(self, monkeypatch):
        class Interrupted(Exception):
            pass

        lock = ReadWriteLock()
        notified = []
        real_notify_all = lock._cond.notify_all

        def interrupted_wait(timeout=None):
            raise Interrupted()

        def recording_notify_all():
            notified.append(True)
            real_notify_all()

        lock.acquire_read()
        monkeypatch.setattr(lock._cond, "wait", interrupted_wait)
        monkeypatch.setattr(lock._cond, "notify_all", recording_notify_all)

        with pytest.raises(Interrupted):
            lock.acquire_write()

        assert notified == [True]
        assert lock._writers_waiting == 0
        assert not lock.write_held
        lock.release_read()
        # New readers are admitted again
        with lock.read_locked():
            assert lock.readers == 1
