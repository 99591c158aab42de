import sys
sys.path.insert(0, '..')

import time
from jsonscribe import inscribe_object

sections = [
    ("Introduction", "Streaming output lets a reader start before the writer is done.\n"),
    ("Details", "Quotes \" and backslashes \\ are escaped as they arrive.\n"),
]

doc = inscribe_object(sys.stdout).with_("title", "Streaming demo")
sections_node = doc.array("sections")

for heading, content in sections:
    section = sections_node.object().with_("heading", heading)
    value = section.value("content")
    for i in range(0, len(content), 4):
        value.append(content[i:i+4])
        sys.stdout.flush()
        time.sleep(0.01)
    value.then().with_("length", len(content)).then()

sections_node.then().with_("complete", True).then()
print()
