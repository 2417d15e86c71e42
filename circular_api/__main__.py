# Copyright 2019 ICON Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import sys

from circular_api import launcher
from circular_api.blockchain.exceptions import CircularError


def main():
    try:
        launcher.main(sys.argv[1:])
    except CircularError as e:
        sys.exit(f"{type(e).__name__}: {e}")
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
