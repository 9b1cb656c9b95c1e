#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import typing
import xml.etree.ElementTree #To read SVG files.

from . import Logger #To log paths that couldn't be read.
from . import PathErrors #To catch paths that couldn't be read.
from .Configuration import Configuration
from .Parser import PathParser
from .PathResult import PathResult

_namespace = "{http://www.w3.org/2000/svg}" #Namespace prefix for all SVG elements.

def is_path(element) -> bool:
	"""
	Whether an XML element is a path element, with or without the SVG
	namespace.
	:param element: The element to check.
	"""
	tag = element.tag
	if not isinstance(tag, str): #Comments and processing instructions.
		return False
	if tag.startswith(_namespace):
		tag = tag[len(_namespace):]
	return tag == "path"

def read_element(root, configuration=None) -> typing.List[typing.Union[PathResult, PathErrors.PathError]]:
	"""
	Reads all paths in an XML element and its descendants.
	:param root: The element to search for paths.
	:param configuration: How to read the paths. If ``None``, the defaults
	are used.
	:return: One result for each path element, in the order in which they
	appear in the document. If the configuration skips errors, paths that
	couldn't be read have their error in their place instead.
	"""
	if configuration is None:
		configuration = Configuration()
	parser = PathParser(configuration.samples_per_curve)

	results = []
	for index, element in enumerate(element for element in root.iter() if is_path(element)):
		path_data = element.attrib.get("d", "") #A path without data is empty, not an error.
		try:
			results.append(parser.parse_path(path_data))
		except PathErrors.PathError as e:
			if configuration.on_error == "abort":
				raise
			Logger.log("w", "Skipping path {index} ({path_id}): {error}".format(index=index, path_id=element.attrib.get("id", "without ID"), error=e))
			results.append(e)
	Logger.log("d", "Read {count} paths.".format(count=len(results)))
	return results

def read_svg(source, configuration=None) -> typing.List[typing.Union[PathResult, PathErrors.PathError]]:
	"""
	Reads all paths in an SVG file.
	:param source: The file name or binary stream of the SVG document.
	:param configuration: How to read the paths.
	:return: One result for each path element, in document order.
	"""
	document = xml.etree.ElementTree.parse(source)
	return read_element(document.getroot(), configuration)

def read_svg_string(text, configuration=None) -> typing.List[typing.Union[PathResult, PathErrors.PathError]]:
	"""
	Reads all paths in a serialised SVG document.
	:param text: The SVG document.
	:param configuration: How to read the paths.
	:return: One result for each path element, in document order.
	"""
	return read_element(xml.etree.ElementTree.fromstring(text), configuration)
