import os
import tempfile
from unittest import TestCase
from unittest.mock import patch
from tfwrap.lib.envrc import (
    Envrc,
    EnvrcEncodingException,
    EnvrcException
)


class TestEnvrc(TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp_dir.name, '.envrc')
        self.envrc = Envrc(self.path)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def write(self, content):
        with open(self.path, 'wb') as f:
            f.write(content)

    def read(self):
        with open(self.path, 'rb') as f:
            return f.read()

    def test_replace_single_line(self):
        self.write(b'export PATH=/x\nexport ENV=dev\nexport FOO=1\n')
        self.envrc.set_env('prod')
        self.assertEqual(self.read(),
                         b'export PATH=/x\nexport ENV=prod\nexport FOO=1\n')

    def test_other_lines_untouched(self):
        self.write(b'# comment\r\nexport ENV=dev\n\nexport A="\xc3\xa9"')
        self.envrc.set_env('qa')
        self.assertEqual(self.read(),
                         b'# comment\r\nexport ENV=qa\n\nexport A="\xc3\xa9"')

    def test_unterminated_env_line_gets_newline(self):
        self.write(b'export FOO=1\nexport ENV=dev')
        self.envrc.set_env('prod')
        self.assertEqual(self.read(), b'export FOO=1\nexport ENV=prod\n')

    def test_no_marker_leaves_document_unchanged(self):
        content = b'export PATH=/x\nexport FOO=1\n'
        self.write(content)
        with self.assertLogs('Envrc', level='WARNING'):
            self.envrc.set_env('prod')
        self.assertEqual(self.read(), content)

    def test_every_matching_line_replaced(self):
        self.write(b'export ENV=dev\nexport FOO=1\n  export ENVIRONMENT=x\n')
        self.envrc.set_env('prod')
        self.assertEqual(self.read(),
                         b'export ENV=prod\nexport FOO=1\nexport ENV=prod\n')

    def test_idempotent(self):
        self.write(b'export PATH=/x\nexport ENV=dev\nexport ENV=old\n')
        self.envrc.set_env('prod')
        once = self.read()
        self.envrc.set_env('prod')
        self.assertEqual(self.read(), once)

    def test_set_env_lines(self):
        lines = ['a\n', 'export ENV=dev\n', 'b']
        self.assertListEqual(self.envrc.set_env_lines(lines, 'prod'),
                             ['a\n', 'export ENV=prod\n', 'b'])

    def test_missing_file(self):
        with self.assertRaisesRegex(EnvrcException, 'Cannot open'):
            self.envrc.set_env('prod')
        self.assertFalse(os.path.exists(self.path))

    def test_invalid_utf8(self):
        content = b'export ENV=dev\nexport BAD=\xff\xfe\n'
        self.write(content)
        with self.assertRaises(EnvrcEncodingException):
            self.envrc.set_env('prod')
        self.assertEqual(self.read(), content)

    def test_keeps_file_mode(self):
        self.write(b'export ENV=dev\n')
        os.chmod(self.path, 0o600)
        self.envrc.set_env('prod')
        self.assertEqual(os.stat(self.path).st_mode & 0o777, 0o600)

    @patch('tfwrap.lib.envrc.os.replace', side_effect=OSError('read-only'))
    def test_write_failure_keeps_original(self, replace):
        content = b'export ENV=dev\n'
        self.write(content)
        with self.assertRaisesRegex(EnvrcException, 'Cannot write'):
            self.envrc.set_env('prod')
        self.assertEqual(self.read(), content)
        self.assertListEqual(os.listdir(self.tmp_dir.name), ['.envrc'])

    def test_writes_through_symlink(self):
        target = os.path.join(self.tmp_dir.name, 'shared.envrc')
        with open(target, 'wb') as f:
            f.write(b'export PATH=/x\nexport ENV=dev\n')
        link = os.path.join(self.tmp_dir.name, 'link.envrc')
        os.symlink(target, link)

        Envrc(link).set_env('prod')

        self.assertTrue(os.path.islink(link))
        with open(target, 'rb') as f:
            self.assertEqual(f.read(), b'export PATH=/x\nexport ENV=prod\n')
        self.assertListEqual(sorted(os.listdir(self.tmp_dir.name)),
                             ['link.envrc', 'shared.envrc'])
