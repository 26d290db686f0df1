import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import main

PROJECT = {
    'project': {'id': 'p1', 'name': 'Launch'},
    'tasks': [
        {'id': 'a', 'name': 'Plan', 'startDate': '2024-03-04', 'endDate': '2024-03-06'},
        {
            'id': 'b',
            'name': 'Ship',
            'startDate': '2024-03-06',
            'endDate': '2024-03-08',
            'dependencies': [{'fromTaskId': 'a', 'toTaskId': 'b'}],
        },
    ],
    'resources': [
        {'id': 'r1', 'name': 'Dana', 'assignments': [{'id': 'x1', 'taskId': 'a'}, {'id': 'x2', 'taskId': 'b'}]},
    ],
}


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.tmp = Path(self._td.name)
        self.project = self.tmp / 'project.json'
        self.project.write_text(json.dumps(PROJECT))

    def tearDown(self) -> None:
        self._td.cleanup()

    def _run(self, *argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main.main(['--config', str(self.tmp / 'none.yaml'), *argv])
        return code, buf.getvalue()

    def test_layout_writes_json(self) -> None:
        out = self.tmp / 'layout.json'
        code, text = self._run('layout', '--project', str(self.project), '--output', str(out))

        self.assertEqual(code, 0)
        self.assertIn('a-b-finish-to-start', text)
        data = json.loads(out.read_text())
        self.assertEqual(data['dependencies'][0]['start_x'], 80)

    def test_utilization_flags_overlap(self) -> None:
        code, text = self._run(
            'utilization', '--project', str(self.project), '--start', '2024-03-04', '--end', '2024-03-08',
        )
        self.assertEqual(code, 0)
        self.assertIn('2024-03-06: 200%  OVERALLOCATED', text)

    def test_critical_path(self) -> None:
        code, text = self._run('critical-path', '--project', str(self.project))
        self.assertEqual(code, 0)
        self.assertIn('Critical path: a -> b', text)

    def test_timeline(self) -> None:
        code, text = self._run('timeline', '--scale', 'week', '--start', '2024-03-04', '--end', '2024-03-10')
        self.assertEqual(code, 0)
        self.assertIn('w 10', text)

    def test_generate_round_trips_through_loader(self) -> None:
        out = self.tmp / 'generated.json'
        code, _ = self._run('generate', '--output', str(out))
        self.assertEqual(code, 0)

        code, text = self._run('layout', '--project', str(out))
        self.assertEqual(code, 0)
        self.assertIn('Gantt Layout', text)

    def test_missing_project_file_returns_error(self) -> None:
        code, _ = self._run('layout', '--project', str(self.tmp / 'missing.json'))
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
