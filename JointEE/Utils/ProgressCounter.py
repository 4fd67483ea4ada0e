import sys, time

class ProgressCounter:
    """
    Prints the progress of a corpus pass on a single, overwritten line of stderr. With a
    known total the progress is shown as a percentage, updated at every "step" percentage
    points, otherwise as a count. The line is also refreshed every "timeStep" seconds.
    """
    def __init__(self, total=None, id="UNKNOWN", step=None, timeStep=30):
        self.total = total
        self.id = id
        self.current = 0
        if step == None and total != None:
            step = 5.0
        self.step = step
        self.timeStep = timeStep
        self.startTime = time.time()
        self.prevPrintTime = 0
        self.prevProgress = None
        self.prevUpdateString = ""

    def getProgress(self):
        if self.total == None:
            return float(self.current)
        if self.total == 0:
            return 100.0
        return 100.0 * self.current / self.total

    def isFinished(self):
        return self.total == None or self.current >= self.total

    def update(self, amount=1, string="Processing: "):
        self.current += amount
        progress = self.getProgress()
        if self.total != None:
            updateString = string + "%.2f" % progress + " %"
        else:
            updateString = string + str(self.current)
        currentTime = time.time()
        updateString += " (" + self.getElapsedTimeString(currentTime) + ")"

        stepExceeded = self.step == None or self.prevProgress == None or progress - self.prevProgress >= self.step
        if stepExceeded or currentTime - self.prevPrintTime > self.timeStep or self.isFinished():
            # pad to overwrite a longer previous line
            padding = max(0, len(self.prevUpdateString) - len(updateString)) * " "
            print("\r" + updateString + padding, end="", file=sys.stderr)
            self.prevProgress = progress
            self.prevPrintTime = currentTime
        self.prevUpdateString = updateString
        if self.total != None and self.isFinished():
            print("", file=sys.stderr)

    def getElapsedTimeString(self, currentTime=None):
        if currentTime == None:
            currentTime = time.time()
        elapsed = int(currentTime - self.startTime)
        return str(elapsed // 3600) + ":" + str((elapsed % 3600) // 60) + ":" + str(elapsed % 60)

    def showLastUpdate(self):
        if self.total != None:
            print(self.id, "count:", str(self.current) + "/" + str(self.total), file=sys.stderr)
        else:
            print(self.id, "count:", self.current, file=sys.stderr)
        print("Last update:", self.prevUpdateString, file=sys.stderr)
