import json

from domainhunt.utils import CheckpointStore


def test_save_and_resume(tmp_path):
    path = tmp_path / "results" / "hunt.json"
    store = CheckpointStore(str(path))
    assert store.load() == {'checked': 0, 'found': 0}

    store.mark_checked('Swift.dev')
    store.mark_checked('oak.com')
    store.add_result({'domain': 'swift.dev', 'price': '~$12/yr'})
    store.save()

    data = json.loads(path.read_text())
    assert data['checked'] == ['oak.com', 'swift.dev']
    assert data['found'] == [{'domain': 'swift.dev', 'price': '~$12/yr'}]
    assert not (tmp_path / "results" / "hunt.json.tmp").exists()

    resumed = CheckpointStore(str(path))
    assert resumed.load() == {'checked': 2, 'found': 1}
    assert resumed.was_checked('swift.dev')
    assert resumed.was_checked('SWIFT.DEV')
    assert not resumed.was_checked('elm.com')


def test_corrupt_file_starts_fresh(tmp_path):
    path = tmp_path / "hunt.json"
    path.write_text("{not json")

    store = CheckpointStore(str(path))
    assert store.load() == {'checked': 0, 'found': 0}


def test_found_is_a_copy(tmp_path):
    store = CheckpointStore(str(tmp_path / "hunt.json"))
    store.add_result({'domain': 'a.com'})
    store.found.append({'domain': 'b.com'})

    assert store.stats()['found'] == 1
