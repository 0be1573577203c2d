import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from bubble_detector.cli.detect import main
from bubble_detector.pipeline import detect_bubbles as pipeline_module
from bubble_detector.services.image_service import ImageService
from tests.synthetic import disc_image, write_png

BLOBS = [((40, 40), 15), ((120, 40), 15)]


class TestDetectBubblesPipeline(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.image_path = write_png(disc_image((100, 200), BLOBS, 0, 255), self.tmp, "bubbles.png")

    def tearDown(self):
        self._tmp.cleanup()

    def test_saves_and_shows(self):
        out = self.tmp / "annotated.png"
        with mock.patch.object(ImageService, "show") as show, redirect_stdout(io.StringIO()):
            report = pipeline_module.detect_bubbles(self.image_path, output_path=out, show=True, window_name="Bubbles")

        self.assertEqual(report.contour_count, 2)
        self.assertTrue(out.is_file())
        show.assert_called_once()
        self.assertEqual(show.call_args[0][1], "Bubbles")

    def test_headless_without_output(self):
        with mock.patch.object(ImageService, "show") as show, redirect_stdout(io.StringIO()):
            pipeline_module.detect_bubbles(self.image_path, show=False)
        show.assert_not_called()


class TestCli(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.image_path = write_png(disc_image((100, 200), BLOBS, 0, 255), self.tmp, "bubbles.png")
        headless = mock.patch.object(pipeline_module, "SHOW_WINDOW", False)
        headless.start()
        self.addCleanup(headless.stop)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_image_exits_with_1(self):
        with self.assertLogs("bubble_detector.cli.detect", level="ERROR") as logs:
            status = main([str(self.tmp / "missing.jpg")])
        self.assertEqual(status, 1)
        self.assertIn("ImageLoadError", logs.output[0])

    def test_success_saves_output(self):
        out = self.tmp / "out" / "annotated.png"
        with mock.patch.object(pipeline_module, "OUTPUT_PATH", str(out)), \
                redirect_stdout(io.StringIO()) as stdout:
            status = main([str(self.image_path)])
        self.assertEqual(status, 0)
        self.assertTrue(out.is_file())
        self.assertIn("Bubble count: 2", stdout.getvalue())

    def test_default_image_path_from_settings(self):
        with mock.patch.object(pipeline_module, "IMAGE_PATH", str(self.image_path)), \
                redirect_stdout(io.StringIO()) as stdout:
            status = main([])
        self.assertEqual(status, 0)
        self.assertIn("Bubble count: 2", stdout.getvalue())

    def test_shows_window_with_configured_name(self):
        with mock.patch.object(pipeline_module, "SHOW_WINDOW", True), \
                mock.patch.object(pipeline_module, "WINDOW_NAME", "Bubbles"), \
                mock.patch.object(ImageService, "show") as show, \
                redirect_stdout(io.StringIO()):
            status = main([str(self.image_path)])
        self.assertEqual(status, 0)
        self.assertEqual(show.call_args[0][1], "Bubbles")

    def test_invalid_configuration_exits_with_2(self):
        with mock.patch.dict(os.environ, {"BLUR_KERNEL_SIZE": "4"}):
            with self.assertLogs("bubble_detector.cli.detect", level="ERROR"):
                status = main([str(self.image_path)])
        self.assertEqual(status, 2)

    def test_non_positive_hough_distance_exits_with_2(self):
        with mock.patch.dict(os.environ, {"HOUGH_MIN_DIST": "0"}):
            with self.assertLogs("bubble_detector.cli.detect", level="ERROR") as logs:
                status = main([str(self.image_path)])
        self.assertEqual(status, 2)
        self.assertIn("Invalid configuration", logs.output[0])


if __name__ == '__main__':
    unittest.main()
