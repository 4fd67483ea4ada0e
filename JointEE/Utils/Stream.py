"""
Copy the messages printed to stdout and stderr into a log file

The messages are still printed on the screen. Progress lines that are
overwritten with a carriage return are logged only in their final form.
"""
import sys, os
import time

TIME_FORMAT = "[%H:%M:%S %d/%m]"

class StreamModifier:
    """
    Replaces a stream such as sys.stderr. Text written to it is passed on to the
    original stream and, one complete line at a time, to the open log files.
    """
    def __init__(self, stream):
        self.stream = stream
        self.logs = {} # filename -> open file
        self.timeFormat = None
        self.prevTime = None
        self.line = ""

    def addLog(self, logfile):
        self.logs[logfile.name] = logfile

    def removeLog(self, filename):
        return self.logs.pop(filename, None)

    def setTimeStamp(self, timeFormat=None):
        self.timeFormat = timeFormat

    def writeToLog(self, text, filename=None):
        """
        Write to the log files only
        """
        for name in sorted(self.logs.keys()):
            if filename == None or name == filename:
                self.logs[name].write(text)
                self.logs[name].flush()

    def _stamp(self):
        if self.timeFormat == None:
            return ""
        stamp = time.strftime(self.timeFormat)
        if stamp == self.prevTime: # repeated stamps are blanked out
            return len(stamp) * " " + "\t"
        self.prevTime = stamp
        return stamp + "\t"

    def write(self, text):
        if text == None or text == "":
            return
        self.stream.write(text)
        self.stream.flush()
        if len(self.logs) == 0:
            return
        for char in text:
            if char == "\r":
                self.line = ""
            elif char == "\n":
                self.writeToLog(self._stamp() + self.line + "\n")
                self.line = ""
            else:
                self.line += char

    def isatty(self):
        return False

    def flush(self):
        self.stream.flush()

def _wrapStreams():
    if not isinstance(sys.stdout, StreamModifier):
        sys.stdout = StreamModifier(sys.stdout)
    if not isinstance(sys.stderr, StreamModifier):
        sys.stderr = StreamModifier(sys.stderr)

def openLog(filename="log.txt", clear=False, timeFormat=TIME_FORMAT):
    """
    Start logging stdout and stderr to a file. The file is appended to unless
    clear is set. The log starts with the command line of the current process.
    """
    if os.path.dirname(filename) != "" and not os.path.exists(os.path.dirname(filename)):
        os.makedirs(os.path.dirname(filename))
    _wrapStreams()
    if clear:
        logfile = open(filename, "wt", encoding="utf-8")
    else:
        logfile = open(filename, "at", encoding="utf-8")
    for stream in (sys.stdout, sys.stderr):
        stream.addLog(logfile)
        stream.setTimeStamp(timeFormat)
    print("Opening log", filename, "at", time.ctime(time.time()), file=sys.stderr)
    writeToLog("####### Log opened at " + time.ctime(time.time()) + " #######\n", filename)
    writeToLog("Command line: " + " ".join(sys.argv) + "\n", filename)

def closeLog(filename):
    """
    Stop logging to a file. The same file object is shared by stdout and stderr.
    """
    removed = set()
    for stream in (sys.stdout, sys.stderr):
        if isinstance(stream, StreamModifier):
            logfile = stream.removeLog(filename)
            if logfile != None:
                removed.add(logfile)
    if len(removed) == 0:
        print("Log not open:", filename, file=sys.stderr)
    for logfile in removed:
        logfile.close()
    print("Closed log", filename, file=sys.stderr)

def writeToLog(text, filename=None):
    assert isinstance(sys.stdout, StreamModifier)
    sys.stdout.writeToLog(text, filename)
