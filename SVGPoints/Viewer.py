#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import sys #For the command line arguments.
import typing
import xml.etree.ElementTree #To catch syntax errors in dropped files.
from PyQt6.QtCore import QLineF, Qt #To display the paths to the user.
from PyQt6.QtGui import QPainter, QPen
from PyQt6.QtWidgets import QApplication, QMessageBox, QWidget

from . import Logger #To log failures to show a file.
from . import PathErrors #To show errors in the file.
from . import SVGReader #To read the files to display.
from .Configuration import Configuration

def line_segments(results) -> typing.List[QLineF]:
	"""
	Turns the results of reading paths into line segments to draw.

	Consecutive points of each path are connected. Paths are not connected to
	each other.
	:param results: The paths to draw.
	:return: A list of line segments.
	"""
	segments = []
	for result in results:
		points = result.points
		for start, end in zip(points, points[1:]):
			segments.append(QLineF(start.x, start.y, end.x, end.y))
	return segments

def skipped_paths_message(results) -> str:
	"""
	Describes the paths of a document that could not be read.
	:param results: The results of reading a document, with errors in place of
	the paths that were skipped.
	:return: One line per skipped path, or an empty string if all paths were
	read.
	"""
	return "\n".join("Path {index}: {error}".format(index=index, error=result) for index, result in enumerate(results) if isinstance(result, PathErrors.PathError))

class Viewer(QWidget):
	"""
	A window that shows the paths of an SVG file as straight lines.

	Files can be opened by dropping them onto the window.
	"""

	def __init__(self, configuration=None, parent=None) -> None:
		"""
		Creates the window, without any paths in it yet.
		:param configuration: How to read the files.
		:param parent: The parent widget, if any.
		"""
		super().__init__(parent)
		self.configuration = configuration if configuration is not None else Configuration()
		self.segments = [] #type: typing.List[QLineF]
		self.setAcceptDrops(True)
		self.setWindowTitle("SVG Points")
		self.resize(800, 600)

	def load(self, file_name) -> bool:
		"""
		Reads an SVG file and shows its paths.

		If the file can't be read, the user is shown why and nothing is drawn. If
		some paths were skipped, the user is shown which ones.
		:param file_name: The SVG file to show.
		:return: Whether the file could be shown.
		"""
		try:
			results = SVGReader.read_svg(file_name, self.configuration)
		except (PathErrors.PathError, xml.etree.ElementTree.ParseError, OSError) as e:
			Logger.log("e", "Unable to show {file_name}: {error}".format(file_name=file_name, error=e))
			self.segments = []
			self.update()
			QMessageBox.critical(self, "Unable to read SVG file", str(e))
			return False
		self.segments = line_segments(result for result in results if not isinstance(result, PathErrors.PathError))
		self.update()
		skipped = skipped_paths_message(results)
		if skipped:
			QMessageBox.warning(self, "Some paths were skipped", skipped)
		return True

	def dragEnterEvent(self, event) -> None:
		if event.mimeData().hasUrls():
			event.acceptProposedAction()

	def dropEvent(self, event) -> None:
		urls = event.mimeData().urls()
		if urls:
			self.load(urls[0].toLocalFile())

	def paintEvent(self, event) -> None:
		painter = QPainter(self)
		painter.setRenderHint(QPainter.RenderHint.Antialiasing)
		painter.setPen(QPen(Qt.GlobalColor.black, 2))
		painter.drawLines(self.segments)
		painter.end()

def main(argv=None) -> int:
	"""
	Shows a window with the SVG file given on the command line, if any.
	:param argv: The command line arguments.
	:return: The exit code of the application.
	"""
	if argv is None:
		argv = sys.argv
	application = QApplication(argv)
	viewer = Viewer()
	if len(argv) > 1:
		viewer.load(argv[1])
	viewer.show()
	return application.exec()

if __name__ == "__main__":
	sys.exit(main())
